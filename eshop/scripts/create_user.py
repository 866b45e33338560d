"""
Create a user (e.g. first admin), creating its role if needed. Run from project root:
  python -m eshop.scripts.create_user USERNAME EMAIL PASSWORD [role] [--name NAME]
Example:
  python -m eshop.scripts.create_user admin admin@shop.io your-secure-password ROLE_ADMIN
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from eshop.core.config import get_settings
from eshop.core.database import SessionLocal
from eshop.core.security import build_token_codec
from eshop.schemas.auth import RegisterRequest
from eshop.services.auth import AuthService
from eshop.services.credentials import SqlCredentialStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an eshop user (bootstrap without the API).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("role", nargs="?", default="ROLE_USER", help="Role name (created if missing)")
    parser.add_argument("--name", default=None, help="Display name (defaults to username)")
    args = parser.parse_args(argv)

    try:
        request = RegisterRequest(
            name=args.name or args.username,
            username=args.username.strip(),
            email=args.email.strip(),
            password=args.password,
            role_name=args.role.strip(),
        )
    except ValidationError as e:
        print(f"Invalid user details: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        service = AuthService(SqlCredentialStore(db), build_token_codec(get_settings()))
        if not service.store.role_exists(request.role_name):
            service.add_role(request.role_name)
        result = service.register(request)
        if not result.ok:
            print(result.error.message, file=sys.stderr)
            return 1
        print(f"Created user '{request.username}' with role '{request.role_name}'.")
        return 0
    except Exception as e:
        logger.exception("User creation failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
