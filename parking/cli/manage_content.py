#!/usr/bin/env python3
"""
CLI tool to seed the rotating landing page content.

Usage:
    python -m parking.cli.manage_content add --type verse --body "For God so loved the world..." --reference "John 3:16"
    python -m parking.cli.manage_content add --type banner --body "Build your site with us" --target-url https://example.com
    python -m parking.cli.manage_content list
    python -m parking.cli.manage_content deactivate --id 3
    python -m parking.cli.manage_content activate --id 3
"""
import argparse
import asyncio
import sys
from typing import Optional

from parking.cli.manage_profiles import open_session
from parking.core.errors import ContentNotFoundError
from parking.db.models import ContentType
from parking.repositories.content_repository import ContentRepository
from parking.services.content_service import ContentService


async def add_content(
    content_type: ContentType,
    body: str,
    reference: Optional[str] = None,
    target_url: Optional[str] = None,
    inactive: bool = False,
    database_url: Optional[str] = None
) -> bool:
    """Add a verse, quote or banner"""
    async with open_session(database_url) as session:
        try:
            content = await ContentService.create_content(
                session,
                content_type=content_type,
                body=body,
                reference=reference,
                target_url=target_url,
                is_active=not inactive
            )
        except ValueError as e:
            print(f"[ERROR] {e}")
            return False

    state = "active" if content.is_active else "inactive"
    print(f"[SUCCESS] Added {content.content_type.value} #{content.id} ({state})")
    return True


async def list_content(database_url: Optional[str] = None) -> bool:
    """List every content row"""
    async with open_session(database_url) as session:
        entries = await ContentRepository(session).list_all()

    if not entries:
        print("No content found.")
        return True

    for entry in entries:
        marker = "*" if entry.is_active else " "
        line = f"{marker} #{entry.id} [{entry.content_type.value}] {entry.body[:60]}"
        if entry.reference:
            line += f" - {entry.reference}"
        if entry.target_url:
            line += f" -> {entry.target_url}"
        print(line)

    active = sum(1 for entry in entries if entry.is_active)
    print(f"\nTotal: {len(entries)} ({active} active, marked *)")
    return True


async def set_active(content_id: int, is_active: bool, database_url: Optional[str] = None) -> bool:
    """Toggle whether an entry is in the rotation"""
    async with open_session(database_url) as session:
        try:
            await ContentService.update_content(session, content_id, is_active=is_active)
        except ContentNotFoundError as e:
            print(f"[ERROR] {e}")
            return False

    print(f"[SUCCESS] Content #{content_id} {'activated' if is_active else 'deactivated'}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Manage rotating landing page content',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    add_parser = subparsers.add_parser('add', help='Add a content entry')
    add_parser.add_argument('--type', required=True, choices=[t.value for t in ContentType], help='Content type')
    add_parser.add_argument('--body', required=True, help='Verse, quote or banner text')
    add_parser.add_argument('--reference', help='Verse reference or quote author')
    add_parser.add_argument('--target-url', help='Banner click-through URL (required for banners)')
    add_parser.add_argument('--inactive', action='store_true', help='Add without putting it in rotation')

    subparsers.add_parser('list', help='List all content')

    activate_parser = subparsers.add_parser('activate', help='Put an entry in rotation')
    activate_parser.add_argument('--id', type=int, required=True, help='Content ID')

    deactivate_parser = subparsers.add_parser('deactivate', help='Take an entry out of rotation')
    deactivate_parser.add_argument('--id', type=int, required=True, help='Content ID')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'add':
        ok = asyncio.run(add_content(
            ContentType(args.type), args.body, args.reference, args.target_url, args.inactive
        ))
    elif args.command == 'list':
        ok = asyncio.run(list_content())
    elif args.command == 'activate':
        ok = asyncio.run(set_active(args.id, True))
    elif args.command == 'deactivate':
        ok = asyncio.run(set_active(args.id, False))

    if not ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
