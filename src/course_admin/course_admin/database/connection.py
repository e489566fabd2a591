from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import credentials, db, firestore

logger = logging.getLogger(__name__)


@dataclass
class FirebaseConfig:
    database_url: str
    credentials_path: Optional[str] = None
    project_id: Optional[str] = None


class FirebaseConnection:
    """Singleton-like holder of the initialised Firebase app.

    Note: The SDK keeps one default app per process; we initialise it lazily on first use.
    """

    _instance: Optional["FirebaseConnection"] = None

    def __init__(self, config: FirebaseConfig):
        self._config = config
        self._app: Optional[firebase_admin.App] = None

    @classmethod
    def get_instance(cls, config: FirebaseConfig) -> "FirebaseConnection":
        if cls._instance is None:
            cls._instance = FirebaseConnection(config)
        return cls._instance

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            if firebase_admin._apps:
                self._app = firebase_admin.get_app()
            else:
                if self._config.credentials_path:
                    cred = credentials.Certificate(self._config.credentials_path)
                else:
                    cred = credentials.ApplicationDefault()
                options = {"databaseURL": self._config.database_url}
                if self._config.project_id:
                    options["projectId"] = self._config.project_id
                self._app = firebase_admin.initialize_app(cred, options)
                logger.info("Firebase app initialised for %s", self._config.database_url)
        return self._app

    def reference(self, path: str) -> db.Reference:
        return db.reference(path, app=self.app)

    def firestore(self):
        return firestore.client(app=self.app)
