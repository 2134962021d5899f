#!/usr/bin/env python3
"""
Create Admin User Script.

Creates an admin account directly in the database, through the same
registration rules the API applies.
Useful for initial setup when no admin exists.

Usage:
    uv run python auto/create_admin.py
    uv run python auto/create_admin.py --email admin@example.com --password Secret123

Environment Variables:
    ADMIN_EMAIL: Admin email (default: admin@example.com)
    ADMIN_PASSWORD: Admin password (default: auto-generated)
    ADMIN_DISPLAY_NAME: Display name (default: Admin)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from dataclasses import dataclass
from datetime import timedelta
from os import environ
from secrets import token_urlsafe
from sys import exit as sys_exit

from learng.configs import settings
from learng.db import close_db, init_db, transaction
from learng.errors import BaseAppError
from learng.managers import TokenCodec
from learng.repositories import UserRepository
from learng.schemas import AuthResponse, RegisterRequest
from learng.services import AuthService


@dataclass(frozen=True)
class AdminUserData:
    """
    Admin user creation data.

    Attributes
    ----------
    email : str
        Admin email address.
    password : str
        Admin password (will be hashed).
    display_name : str
        Name shown in the client.
    auto_generated : bool
        Whether the password was generated by this script.
    """

    email: str
    password: str
    display_name: str
    auto_generated: bool = False


def generate_secure_password(length: int = 16) -> str:
    """
    Generate a random password that passes the registration rules.

    Parameters
    ----------
    length : int
        Length of the random part (default: 16).

    Returns
    -------
    str
        Password with at least one digit.
    """
    password = token_urlsafe(length)
    return f"Admin{password[:12]}1"


def get_admin_data(args: Namespace) -> AdminUserData:
    """Merge command line arguments, environment and defaults."""
    password = args.password or environ.get("ADMIN_PASSWORD")
    auto_generated = password is None
    return AdminUserData(
        email=args.email or environ.get("ADMIN_EMAIL", "admin@example.com"),
        password=password or generate_secure_password(),
        display_name=args.display_name or environ.get("ADMIN_DISPLAY_NAME", "Admin"),
        auto_generated=auto_generated,
    )


async def create_admin_user(admin_data: AdminUserData) -> AuthResponse:
    """
    Register ``admin_data`` as an admin account.

    Parameters
    ----------
    admin_data : AdminUserData
        Admin user data container.

    Returns
    -------
    AuthResponse
        Created account and an access token for it.

    Raises
    ------
    InputValidationError
        If the email is taken or the password is too weak.
    """
    codec = TokenCodec(
        settings.JWT_SECRET.get_secret_value(),
        ttl=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
        algorithm=settings.JWT_ALGORITHM,
    )
    await init_db()
    try:
        async with transaction() as session:
            service = AuthService(UserRepository(session), codec)
            return await service.register(
                RegisterRequest(
                    email=admin_data.email,
                    password=admin_data.password,
                    display_name=admin_data.display_name,
                    role="admin",
                ),
            )
    finally:
        await close_db()


def parse_args() -> Namespace:
    parser = ArgumentParser(
        description="Create an admin user in the database.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run python auto/create_admin.py -e admin@mysite.com -p MySecurePass123
  uv run python auto/create_admin.py --email boss@company.com --display-name "Big Boss"
        """,
    )
    parser.add_argument(
        "-e",
        "--email",
        default=None,
        help="Admin email (default: admin@example.com or ADMIN_EMAIL env var)",
    )
    parser.add_argument(
        "-p",
        "--password",
        default=None,
        help="Admin password (default: auto-generated or ADMIN_PASSWORD env var)",
    )
    parser.add_argument(
        "-d",
        "--display-name",
        default=None,
        help="Display name (default: Admin or ADMIN_DISPLAY_NAME env var)",
    )
    parser.add_argument(
        "--show-token",
        "-t",
        action="store_true",
        help="Print an access token for the new admin",
    )
    return parser.parse_args()


async def main() -> int:
    """
    Run the admin creation process.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error).
    """
    args = parse_args()
    admin_data = get_admin_data(args)

    try:
        result = await create_admin_user(admin_data)
    except BaseAppError as e:
        print(f"\n❌ Error: {e.detail}")
        return 1

    print("\n✅ Admin user created successfully!")
    print(f"   ID:    {result.user.id}")
    print(f"   Email: {result.user.email}")
    print(f"   Role:  {result.user.role}")
    if admin_data.auto_generated:
        print(f"   Password: {admin_data.password}")
        print("\n⚠️  NOTE: This password was auto-generated. Save it now!")
    if args.show_token:
        print(f"   Token: {result.token}")
    return 0


if __name__ == "__main__":
    sys_exit(asyncio_run(main()))
