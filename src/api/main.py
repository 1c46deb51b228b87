"""
FastAPI backend: the address book's presentation layer (list, add, edit email, delete, clear, sort, generate).
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

import re
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from neo4j import GraphDatabase
from pydantic import BaseModel

from addressbook.application import (
    ContactListManager,
    Invalid,
    KeyValueStore,
    generate_contacts,
)
from addressbook.domain import Contact, IndexOutOfRange, SortKey
from addressbook.infrastructure import (
    InMemoryPreferences,
    JsonFilePreferences,
    Neo4jPreferences,
    PreferencesContactStore,
    ensure_preferences_constraint,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

# Optional: multi-user placeholder (REST)
USER_ID_HEADER = "X-User-Id"
DEFAULT_USER_ID = "default"
_USER_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")

STORE_MEMORY = "memory"
STORE_FILE = "file"
STORE_NEO4J = "neo4j"
DEFAULT_PREFS_PATH = ".addressbook/preferences.json"


def _store_kind() -> str:
    return os.environ.get("ADDRESSBOOK_STORE", STORE_FILE).strip().lower() or STORE_FILE


def _prefs_path(user_id: str) -> Path:
    """One preferences file per user; the default user keeps the configured path."""
    path = Path(os.environ.get("ADDRESSBOOK_PREFS_PATH", DEFAULT_PREFS_PATH).strip())
    if user_id == DEFAULT_USER_ID:
        return path
    return path.with_name(f"{path.stem}.{user_id}{path.suffix}")


def _get_driver():
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    return GraphDatabase.driver(uri, auth=(user, password))


# Per-user ContactListManager cache (same user keeps the same in-memory list)
_manager_cache: dict[str, ContactListManager] = {}
_manager_cache_lock = threading.Lock()


def _preferences_for(user_id: str, app: FastAPI) -> KeyValueStore:
    kind = _store_kind()
    if kind == STORE_MEMORY:
        return InMemoryPreferences()
    if kind == STORE_NEO4J:
        return Neo4jPreferences(_get_cached_driver(app), user_id=user_id)
    if kind == STORE_FILE:
        return JsonFilePreferences(_prefs_path(user_id))
    raise RuntimeError(f"Unknown ADDRESSBOOK_STORE {kind!r}")


def get_manager(user_id: str, app: FastAPI) -> ContactListManager:
    with _manager_cache_lock:
        if user_id not in _manager_cache:
            store = PreferencesContactStore(_preferences_for(user_id, app))
            manager = ContactListManager(store)
            result = manager.load()
            if not result.ok:
                logger.warning(
                    "User %s: %d stored contact record(s) could not be read",
                    user_id,
                    len(result.failures),
                )
            _manager_cache[user_id] = manager
        return _manager_cache[user_id]


def _get_cached_driver(app: FastAPI):
    if getattr(app.state, "driver", None) is None:
        app.state.driver = _get_driver()
    return app.state.driver


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    logger.info("Address book store: %s", _store_kind())
    try:
        if _store_kind() == STORE_NEO4J:
            app.state.driver = _get_driver()
            ensure_preferences_constraint(app.state.driver)
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()
        _manager_cache.clear()


app = FastAPI(title="Address Book API", lifespan=lifespan)


def _user_id(x_user_id: str | None) -> str:
    user_id = (x_user_id or "").strip() or DEFAULT_USER_ID
    # User id also names the preferences file.
    if not _USER_ID_PATTERN.fullmatch(user_id):
        raise HTTPException(status_code=400, detail="Invalid user id")
    return user_id


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    first_name: str
    last_name: str
    email: str


class EditEmailBody(BaseModel):
    email: str


class ContactListItem(BaseModel):
    index: int
    first_name: str
    last_name: str
    email: str
    full_name: str


def _list_item(index: int, contact: Contact) -> ContactListItem:
    return ContactListItem(
        index=index,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        full_name=contact.full_name,
    )


def _list_items(contacts: tuple[Contact, ...]) -> list[ContactListItem]:
    return [_list_item(i, c) for i, c in enumerate(contacts)]


def _invalid(result: Invalid) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"reason": result.reason, "fields": list(result.fields)},
    )


@app.get("/contacts")
def list_contacts(
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    return _list_items(manager.contacts)


@app.post("/contacts")
def create_contact(
    body: ContactBody,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    result = manager.add(
        Contact(first_name=body.first_name, last_name=body.last_name, email=body.email)
    )
    if isinstance(result, Invalid):
        raise _invalid(result)
    return JSONResponse(
        content={"index": result.index, "full_name": result.contact.full_name},
        status_code=201,
    )


@app.put("/contacts/{index}")
def edit_contact_email(
    index: int,
    body: EditEmailBody,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    try:
        result = manager.update(index, body.email)
    except IndexOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if isinstance(result, Invalid):
        raise _invalid(result)
    return _list_item(result.index, result.contact)


@app.delete("/contacts/{index}")
def delete_contact(
    index: int,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    try:
        removed = manager.remove(index)
    except IndexOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"index": removed.index, "full_name": removed.contact.full_name}


@app.delete("/contacts")
def clear_contacts(
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    manager.clear()
    return {"status": "cleared"}


@app.post("/contacts/sort")
def sort_contacts(
    key: SortKey,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    return _list_items(manager.sort_by(key))


@app.post("/contacts/generate")
def generate_mock_contacts(
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    manager = get_manager(_user_id(x_user_id), request.app)
    report = generate_contacts(manager)
    return {
        "added": len(report.added),
        "rejected": [
            {"position": r.position, "reason": r.reason} for r in report.rejected
        ],
    }
