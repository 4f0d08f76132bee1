"""
FastAPI backend: read-only views over the contact directory.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from neo4j import GraphDatabase
from pydantic import BaseModel

from peerbook.application import (
    EnrichedContact,
    active_contacts,
    blocked_identities,
    enrich_many,
    enrich_one,
    filter_dev_tools_only,
    find_by_address,
    resolve_roster,
    sort_contacts,
)
from peerbook.domain import PrivacySetting
from peerbook.infrastructure import (
    DirectorySnapshot,
    Neo4jContactDirectory,
    ensure_contact_constraint,
    load_snapshot,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

BACKEND_YAML = "yaml"
BACKEND_NEO4J = "neo4j"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def _backend() -> str:
    return os.environ.get("PEERBOOK_BACKEND", BACKEND_YAML).strip().lower() or BACKEND_YAML


def _default_privacy() -> PrivacySetting:
    raw = os.environ.get("PEERBOOK_PRIVACY", "").strip()
    if not raw:
        return PrivacySetting.CONTACTS_ONLY
    try:
        return PrivacySetting(raw)
    except ValueError:
        logger.warning("Unknown PEERBOOK_PRIVACY %r, using contacts-only", raw)
        return PrivacySetting.CONTACTS_ONLY


def _get_driver():
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    return GraphDatabase.driver(uri, auth=(user, password))


def get_snapshot(app: FastAPI) -> DirectorySnapshot:
    """Current snapshot. YAML snapshots are loaded once; Neo4j contacts are re-read per request."""
    base = getattr(app.state, "snapshot", None)
    if base is None:
        base = load_snapshot()
        app.state.snapshot = base
    driver = getattr(app.state, "driver", None)
    if driver is None:
        return base
    owner = base.self_profile.identity if base.self_profile else "default"
    contacts = Neo4jContactDirectory(driver, user_id=owner).snapshot()
    return DirectorySnapshot(
        contacts=contacts,
        self_profile=base.self_profile,
        groups=base.groups,
        dapps=base.dapps,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    app.state.snapshot = None
    try:
        if _backend() == BACKEND_NEO4J:
            app.state.driver = _get_driver()
            ensure_contact_constraint(app.state.driver)
            logger.info("Reading contacts from Neo4j")
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()


app = FastAPI(title="Peerbook API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ImageItem(BaseModel):
    kind: str
    uri: str
    width: int | None = None
    height: int | None = None


class ContactItem(BaseModel):
    identity: str
    display_name: str
    alias: str
    name: str | None = None
    identicon: str
    address: str | None = None
    added: bool
    pending: bool
    legacy_pending: bool
    blocked: bool
    active: bool
    images: list[ImageItem] | None = None


class RosterItem(BaseModel):
    identity: str
    alias: str
    name: str | None = None
    admin: bool


def _contact_item(enriched: EnrichedContact) -> ContactItem:
    images = None
    if enriched.images is not None:
        images = [
            ImageItem(kind=i.kind, uri=i.uri, width=i.width, height=i.height)
            for i in enriched.images.values()
        ]
    return ContactItem(
        identity=enriched.identity,
        display_name=enriched.display_name,
        alias=enriched.alias,
        name=enriched.name,
        identicon=enriched.identicon,
        address=enriched.address,
        added=enriched.added,
        pending=enriched.pending,
        legacy_pending=enriched.legacy_pending,
        blocked=enriched.blocked,
        active=enriched.active,
        images=images,
    )


def _privacy(raw: str | None) -> PrivacySetting:
    if raw is None or not raw.strip():
        return _default_privacy()
    try:
        return PrivacySetting(raw.strip())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown privacy setting: {raw}")


def _self_identity(snapshot: DirectorySnapshot) -> str | None:
    return snapshot.self_profile.identity if snapshot.self_profile else None


@app.get("/contacts")
def list_contacts(request: Request, privacy: str | None = None):
    snapshot = get_snapshot(request.app)
    enriched = enrich_many(snapshot.contacts, _privacy(privacy), _self_identity(snapshot))
    return [_contact_item(enriched[c.identity]) for c in sort_contacts(snapshot.contacts)]


@app.get("/contacts/active")
def list_active_contacts(request: Request, privacy: str | None = None):
    snapshot = get_snapshot(request.app)
    setting = _privacy(privacy)
    own = _self_identity(snapshot)
    return [
        _contact_item(enrich_one(c, setting, own))
        for c in active_contacts(snapshot.contacts)
    ]


@app.get("/contacts/blocked")
def list_blocked_identities(request: Request):
    snapshot = get_snapshot(request.app)
    return sorted(blocked_identities(snapshot.contacts))


@app.get("/contacts/by-address/{address}")
def get_contact_by_address(address: str, request: Request, privacy: str | None = None):
    snapshot = get_snapshot(request.app)
    contact = find_by_address(snapshot.contacts, address)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return _contact_item(enrich_one(contact, _privacy(privacy), _self_identity(snapshot)))


# --- REST: groups ---


@app.get("/groups/{chat_id}/roster")
def get_group_roster(chat_id: str, request: Request):
    snapshot = get_snapshot(request.app)
    group = snapshot.groups.get(chat_id)
    if group is None:
        raise HTTPException(status_code=404, detail="Group not found")
    roster = resolve_roster(group, snapshot.contacts, snapshot.self_profile)
    return [
        RosterItem(identity=e.identity, alias=e.alias, name=e.name, admin=e.admin)
        for e in roster
    ]


# --- REST: dapps ---


@app.get("/dapps")
def list_dapps(request: Request):
    snapshot = get_snapshot(request.app)
    return filter_dev_tools_only(snapshot.dapps, _env_flag("PEERBOOK_DEV_MODE"))
