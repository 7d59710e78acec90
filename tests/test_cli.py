"""
Tests for the profile and content management CLIs
"""
import pytest

from parking.cli import manage_content, manage_profiles
from parking.db.models import ContentType, ProfileRole, ProfileStatus
from parking.repositories.content_repository import ContentRepository
from parking.services.profile_service import ProfileService


@pytest.fixture
def cli_db(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"


async def load_profile(database_url, email):
    async with manage_profiles.open_session(database_url) as session:
        return await ProfileService.get_by_email(session, email)


@pytest.mark.asyncio
async def test_create_admin_profile(cli_db, capsys):
    ok = await manage_profiles.create_profile(
        "boss@example.com", password="password123", admin=True, database_url=cli_db
    )

    assert ok
    assert "[SUCCESS] Profile created successfully!" in capsys.readouterr().out
    profile = await load_profile(cli_db, "boss@example.com")
    assert profile.role == ProfileRole.ADMIN


@pytest.mark.asyncio
async def test_create_with_generated_password(cli_db, capsys):
    ok = await manage_profiles.create_profile("gen@example.com", database_url=cli_db)

    assert ok
    assert "SAVE THIS PASSWORD" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_create_duplicate_fails(cli_db, capsys):
    await manage_profiles.create_profile("twice@example.com", password="password123", database_url=cli_db)

    ok = await manage_profiles.create_profile("twice@example.com", password="password123", database_url=cli_db)

    assert not ok
    assert "[ERROR]" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_disable_enable_promote(cli_db):
    await manage_profiles.create_profile("seller@example.com", password="password123", database_url=cli_db)

    assert await manage_profiles.set_status("seller@example.com", ProfileStatus.DISABLED, database_url=cli_db)
    assert (await load_profile(cli_db, "seller@example.com")).status == ProfileStatus.DISABLED

    assert await manage_profiles.set_status("seller@example.com", ProfileStatus.ACTIVE, database_url=cli_db)
    assert await manage_profiles.promote("seller@example.com", database_url=cli_db)

    profile = await load_profile(cli_db, "seller@example.com")
    assert profile.status == ProfileStatus.ACTIVE
    assert profile.role == ProfileRole.ADMIN


@pytest.mark.asyncio
async def test_unknown_email_fails(cli_db, capsys):
    assert not await manage_profiles.promote("ghost@example.com", database_url=cli_db)
    assert "not found" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_list_profiles(cli_db, capsys):
    await manage_profiles.create_profile("listed@example.com", password="password123", database_url=cli_db)
    capsys.readouterr()

    assert await manage_profiles.list_profiles(database_url=cli_db)

    out = capsys.readouterr().out
    assert "listed@example.com" in out
    assert "Total profiles: 1" in out


@pytest.mark.asyncio
async def test_change_password_mismatch(cli_db, monkeypatch, capsys):
    answers = iter(["newpassword1", "different123"])
    monkeypatch.setattr(manage_profiles.getpass, "getpass", lambda prompt="": next(answers))

    assert not await manage_profiles.change_password("anyone@example.com", database_url=cli_db)
    assert "Passwords do not match" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_content_add_list_and_toggle(cli_db, capsys):
    assert await manage_content.add_content(
        ContentType.VERSE, "The Lord is my shepherd", reference="Psalm 23:1", database_url=cli_db
    )
    assert not await manage_content.add_content(ContentType.BANNER, "No link", database_url=cli_db)

    async with manage_profiles.open_session(cli_db) as session:
        entries = await ContentRepository(session).list_all()
    assert len(entries) == 1
    content_id = entries[0].id

    assert await manage_content.set_active(content_id, False, database_url=cli_db)
    assert not await manage_content.set_active(9999, True, database_url=cli_db)

    capsys.readouterr()
    assert await manage_content.list_content(database_url=cli_db)
    out = capsys.readouterr().out
    assert "Psalm 23:1" in out
    assert "(0 active" in out


def test_parsers_accept_documented_commands():
    parser = manage_profiles.build_parser()
    args = parser.parse_args(["create", "--email", "a@example.com", "--admin"])
    assert args.command == "create" and args.admin

    parser = manage_content.build_parser()
    args = parser.parse_args(["add", "--type", "banner", "--body", "x", "--target-url", "https://example.com"])
    assert args.type == "banner"
    assert args.target_url == "https://example.com"
