from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.service import AdminAuthService
from .applications.repository import RealtimeApplicationRepository
from .applications.service import ApplicationService
from .attendance.repository import RealtimeAttendanceRepository
from .attendance.service import AttendanceService
from .categories.repository import RealtimeCategoryRepository
from .categories.service import CategoryService
from .core.constants import DEFAULT_COURSE_IMAGE_MB, DEFAULT_HELP_IMAGE_MB
from .courses.repository import FirestoreCourseRepository
from .courses.service import CourseService
from .database.connection import FirebaseConfig, FirebaseConnection
from .database.firebase_store import FirebaseRealtimeStore, FirestoreDocumentStore
from .database.store import DocumentStore, RealtimeStore
from .help_requests.repository import FirestoreHelpRequestRepository
from .help_requests.service import HelpRequestService
from .meetings.repository import RealtimeMeetLinkRepository
from .meetings.service import MeetLinkService
from .notifications.repository import RealtimeNotificationRepository
from .notifications.service import NotificationService
from .payments.repository import RealtimePaymentRepository
from .payments.service import PaymentService


@dataclass(frozen=True)
class Container:
    realtime: RealtimeStore
    documents: DocumentStore

    attendance_repo: RealtimeAttendanceRepository

    attendance_service: AttendanceService
    category_service: CategoryService
    course_service: CourseService
    meet_link_service: MeetLinkService
    notification_service: NotificationService
    help_request_service: HelpRequestService
    application_service: ApplicationService
    payment_service: PaymentService
    admin_auth_service: AdminAuthService


def build_container(
    *,
    firebase_config: Optional[dict] = None,
    realtime: Optional[RealtimeStore] = None,
    documents: Optional[DocumentStore] = None,
    max_course_image_mb: float = DEFAULT_COURSE_IMAGE_MB,
    max_help_image_mb: float = DEFAULT_HELP_IMAGE_MB,
) -> Container:
    """Wire repositories and services.

    Stores default to Firebase built from ``firebase_config``; tests pass in-memory ones.
    """
    if realtime is None or documents is None:
        if not firebase_config:
            raise ValueError("firebase_config is required when stores are not injected")
        config = FirebaseConfig(
            database_url=str(firebase_config["database_url"]),
            credentials_path=firebase_config.get("credentials_path") or None,
            project_id=firebase_config.get("project_id") or None,
        )
        conn = FirebaseConnection.get_instance(config)
        realtime = realtime or FirebaseRealtimeStore(conn)
        documents = documents or FirestoreDocumentStore(conn)

    attendance_repo = RealtimeAttendanceRepository(realtime)

    return Container(
        realtime=realtime,
        documents=documents,
        attendance_repo=attendance_repo,
        attendance_service=AttendanceService(attendance_repo),
        category_service=CategoryService(RealtimeCategoryRepository(realtime)),
        course_service=CourseService(FirestoreCourseRepository(documents), max_image_mb=max_course_image_mb),
        meet_link_service=MeetLinkService(RealtimeMeetLinkRepository(realtime)),
        notification_service=NotificationService(RealtimeNotificationRepository(realtime)),
        help_request_service=HelpRequestService(FirestoreHelpRequestRepository(documents), max_image_mb=max_help_image_mb),
        application_service=ApplicationService(RealtimeApplicationRepository(realtime)),
        payment_service=PaymentService(RealtimePaymentRepository(realtime)),
        admin_auth_service=AdminAuthService(realtime),
    )
