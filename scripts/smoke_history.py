# quick offline smoke: temp data dir, real SQLite + Alembic, one round through the manager
import asyncio
import os
import tempfile

os.environ.setdefault("REPOHISTORY_DATA_DIR", tempfile.mkdtemp(prefix="repohistory-smoke-"))

from repohistory.app import create_manager  # noqa: E402
from repohistory.settings import AppSettings  # noqa: E402


async def main():
    manager = create_manager(settings=AppSettings(recent_repositories_history_size=2, debug=True))
    for path in ("/src/a", "/src/b", "/src/c", "/src/a"):
        await manager.add_as_most_recent(path)
    await manager.remove_recent("/src/b")
    print([e.path for e in await manager.load_recent_history()])


asyncio.run(main())
