"""
Bootstrap the first back-office admin.
Creates a default admin when the admins table is empty so the API can be used.
"""
import argparse
import asyncio

from tradehub.core.config import get_settings
from tradehub.core.container import ApplicationContainer
from tradehub.core.logging import configure_logging
from tradehub.infrastructure.database.session import session_scope
from tradehub.modules.admins import AdminCreateInput, AdminService

SYSTEM_CREATOR = "system"


async def create_default_admin(username: str, password: str) -> None:
    settings = get_settings()
    container = ApplicationContainer.from_settings(settings)
    await container.init_db()

    try:
        async for db in session_scope(container.session_factory):
            service = AdminService.with_session(db, bcrypt_rounds=settings.security.bcrypt_rounds)
            if await service.has_admins():
                print("An admin already exists, nothing to do")
                continue

            await service.create_admin(
                AdminCreateInput(
                    username=username,
                    password=password,
                    created_by_id=SYSTEM_CREATOR,
                    created_by_username=SYSTEM_CREATOR,
                )
            )

            print("=" * 50)
            print("Default admin created")
            print("=" * 50)
            print(f"Username: {username}")
            print(f"Password: {password}")
            print("=" * 50)
            print("Change the password after the first login!")
            print("=" * 50)
    finally:
        await container.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", default="admin123")
    args = parser.parse_args()
    configure_logging(get_settings())
    asyncio.run(create_default_admin(args.username, args.password))
