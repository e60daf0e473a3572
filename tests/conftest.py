from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Iterator

import pytest

# Ensure `import tfe` works when running `pytest` from repo root without an install.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from fake_tfe import FakeTFE, make_client  # noqa: E402

from tfe import Client, OrganizationCreateOptions  # noqa: E402


@pytest.fixture
def fake() -> FakeTFE:
    return FakeTFE()


@pytest.fixture
def client(fake: FakeTFE) -> Iterator[Client]:
    c = make_client(fake)
    yield c
    asyncio.run(c.aclose())


@pytest.fixture
def org_name(client: Client) -> str:
    org = asyncio.run(
        client.organizations.create(OrganizationCreateOptions(name="tst-org", email="ops@example.com"))
    )
    return org.name
