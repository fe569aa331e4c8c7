from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterator

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from kitchenpos.infrastructure.db import session as db_session

PROJECT_DIR = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session", autouse=True)
def integration_environment(tmp_path_factory: pytest.TempPathFactory) -> Iterator[None]:
    database_path = tmp_path_factory.mktemp("db") / "kitchenpos.sqlite3"
    previous_url = os.environ.get("DATABASE_URL")
    os.environ["DATABASE_URL"] = f"sqlite+pysqlite:///{database_path}"
    os.environ.setdefault("OTEL_SERVICE_NAME", "kitchenpos-backend-test")
    db_session._build_engine.cache_clear()

    env = os.environ.copy()
    env["PYTHONPATH"] = f"{PROJECT_DIR / 'src'}{os.pathsep}{env.get('PYTHONPATH', '')}".rstrip(
        os.pathsep
    )

    subprocess.run(
        [sys.executable, "-m", "alembic", "-c", "alembic.ini", "upgrade", "head"],
        cwd=PROJECT_DIR,
        env=env,
        check=True,
    )
    subprocess.run(
        [sys.executable, "-m", "kitchenpos.tools.seed"],
        cwd=PROJECT_DIR,
        env=env,
        check=True,
    )
    yield

    db_session._build_engine.cache_clear()
    if previous_url is None:
        os.environ.pop("DATABASE_URL", None)
    else:
        os.environ["DATABASE_URL"] = previous_url
