from __future__ import annotations

import argparse
import getpass
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.course_admin.course_admin.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description="Set the admin login stored in the realtime database.")
    parser.add_argument("user_id")
    parser.add_argument("--password", help="prompted for when omitted")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(firebase_config=settings.FIREBASE_CONFIG)

    password = args.password or getpass.getpass("Admin password: ")
    container.admin_auth_service.set_credentials(args.user_id, password)

    print(f"OK: Admin login set for {args.user_id} -> {settings.FIREBASE_CONFIG.get('database_url')}")


if __name__ == "__main__":
    main()
