#!/usr/bin/env python3
"""
CLI tool to manage dashboard profiles.

Usage:
    python -m parking.cli.manage_profiles create --email admin@example.com --password SecurePass123 --admin
    python -m parking.cli.manage_profiles create --email seller@example.com --interactive
    python -m parking.cli.manage_profiles list
    python -m parking.cli.manage_profiles change-password --email seller@example.com
    python -m parking.cli.manage_profiles disable --email spammer@example.com
    python -m parking.cli.manage_profiles enable --email seller@example.com
    python -m parking.cli.manage_profiles promote --email trusted@example.com

Examples:
    # Bootstrap the first admin (there is no sign-up path to role admin)
    python -m parking.cli.manage_profiles create --email admin@example.com --admin

    # Disabling a seller takes all their landing pages offline
    python -m parking.cli.manage_profiles disable --email spammer@example.com
"""
import argparse
import asyncio
import getpass
import secrets
import sys
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from parking.config import settings
from parking.core.errors import EmailAlreadyRegisteredError
from parking.db.connection import create_engine_for_url
from parking.db.models import Base, ProfileRole, ProfileStatus
from parking.services.profile_service import MIN_PASSWORD_LENGTH, ProfileService


@asynccontextmanager
async def open_session(database_url: Optional[str] = None):
    """Standalone engine + session for one CLI command (tables created if missing)"""
    engine = create_engine_for_url(database_url or settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_maker() as session:
            yield session
    finally:
        await engine.dispose()


def prompt_new_password() -> Optional[str]:
    password = getpass.getpass("Enter password: ")
    password_confirm = getpass.getpass("Confirm password: ")

    if password != password_confirm:
        print("[ERROR] Passwords do not match")
        return None
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"[ERROR] Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return None
    return password


async def create_profile(
    email: str,
    password: Optional[str] = None,
    interactive: bool = False,
    admin: bool = False,
    database_url: Optional[str] = None
) -> bool:
    """Create a new profile"""
    generated = False
    if interactive:
        print(f"Creating profile '{email}'")
        password = prompt_new_password()
        if password is None:
            return False
    elif not password:
        password = secrets.token_urlsafe(16)
        generated = True
        print("ℹ️  No password provided, generating random password")

    role = ProfileRole.ADMIN if admin else ProfileRole.USER

    async with open_session(database_url) as session:
        try:
            profile = await ProfileService.create_profile(session, email, password, role=role)
        except (ValueError, EmailAlreadyRegisteredError) as e:
            print(f"[ERROR] {e}")
            return False

    print("\n" + "=" * 70)
    print("[SUCCESS] Profile created successfully!")
    print("=" * 70)
    print()
    print(f"Email: {profile.email}")
    if generated:
        print(f"Password: {password}")
        print()
        print("⚠️  SAVE THIS PASSWORD - It will not be shown again!")
    print()
    print("Profile Details:")
    print(f"  ID: {profile.id}")
    print(f"  Role: {profile.role.value}")
    print(f"  Status: {profile.status.value}")
    print(f"  Created: {profile.created_at.strftime('%Y-%m-%d %H:%M:%S UTC')}")
    print()
    print("=" * 70)
    return True


async def list_profiles(database_url: Optional[str] = None) -> bool:
    """List all profiles with their domain counts"""
    async with open_session(database_url) as session:
        rows = await ProfileService.list_with_domain_counts(session)

    if not rows:
        print("No profiles found.")
        return True

    print("\n" + "=" * 70)
    print("Profiles:")
    print("=" * 70)
    print()

    for profile, domain_count in rows:
        print(f"  - {profile.email}")
        print(f"    ID: {profile.id}")
        print(f"    Role: {profile.role.value}")
        print(f"    Status: {profile.status.value}")
        print(f"    Domains: {domain_count}")
        print(f"    Created: {profile.created_at.strftime('%Y-%m-%d %H:%M:%S UTC')}")
        print()

    print(f"Total profiles: {len(rows)}")
    print("=" * 70)
    return True


async def change_password(email: str, database_url: Optional[str] = None) -> bool:
    """Change a profile's password"""
    print(f"Changing password for '{email}'")
    new_password = prompt_new_password()
    if new_password is None:
        return False

    async with open_session(database_url) as session:
        profile = await ProfileService.get_by_email(session, email)
        if not profile:
            print(f"[ERROR] Profile '{email}' not found")
            return False

        await ProfileService.update_password(session, profile.id, new_password)

    print(f"[SUCCESS] Password updated successfully for '{email}'")
    return True


async def set_status(email: str, status: ProfileStatus, database_url: Optional[str] = None) -> bool:
    """Enable or disable a profile"""
    async with open_session(database_url) as session:
        profile = await ProfileService.get_by_email(session, email)
        if not profile:
            print(f"[ERROR] Profile '{email}' not found")
            return False

        await ProfileService.update_profile(session, profile.id, status=status)

    print(f"[SUCCESS] Profile '{email}' is now {status.value}")
    return True


async def promote(email: str, database_url: Optional[str] = None) -> bool:
    """Give a profile the admin role"""
    async with open_session(database_url) as session:
        profile = await ProfileService.get_by_email(session, email)
        if not profile:
            print(f"[ERROR] Profile '{email}' not found")
            return False

        await ProfileService.update_profile(session, profile.id, role=ProfileRole.ADMIN)

    print(f"[SUCCESS] Profile '{email}' promoted to admin")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Manage dashboard profiles',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    create_parser = subparsers.add_parser('create', help='Create a new profile')
    create_parser.add_argument('--email', required=True, help='Login e-mail')
    create_parser.add_argument('--password', help='Password (if not provided, will generate random)')
    create_parser.add_argument('--interactive', action='store_true', help='Prompt for password interactively')
    create_parser.add_argument('--admin', action='store_true', help='Create with role admin')

    subparsers.add_parser('list', help='List all profiles')

    change_password_parser = subparsers.add_parser('change-password', help='Change profile password')
    change_password_parser.add_argument('--email', required=True, help='Login e-mail')

    disable_parser = subparsers.add_parser('disable', help='Disable a profile (hides its domains)')
    disable_parser.add_argument('--email', required=True, help='Login e-mail')

    enable_parser = subparsers.add_parser('enable', help='Re-enable a profile')
    enable_parser.add_argument('--email', required=True, help='Login e-mail')

    promote_parser = subparsers.add_parser('promote', help='Give a profile the admin role')
    promote_parser.add_argument('--email', required=True, help='Login e-mail')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'create':
        ok = asyncio.run(create_profile(args.email, args.password, args.interactive, args.admin))
    elif args.command == 'list':
        ok = asyncio.run(list_profiles())
    elif args.command == 'change-password':
        ok = asyncio.run(change_password(args.email))
    elif args.command == 'disable':
        confirm = input(f"Disable profile '{args.email}'? Its domains will stop rendering. (yes/no): ")
        if confirm.lower() not in ['yes', 'y']:
            print("Cancelled")
            return
        ok = asyncio.run(set_status(args.email, ProfileStatus.DISABLED))
    elif args.command == 'enable':
        ok = asyncio.run(set_status(args.email, ProfileStatus.ACTIVE))
    elif args.command == 'promote':
        ok = asyncio.run(promote(args.email))

    if not ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
