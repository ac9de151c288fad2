"""
FastAPI backend: REST API over the contact directory.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
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
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from neo4j import GraphDatabase
from pydantic import BaseModel, ConfigDict

from api.settings import STORE_NEO4J, Settings
from phonebook.application import (
    ContactError,
    ContactService,
    NotFound,
    parse_contact_id,
)
from phonebook.domain import Contact
from phonebook.infrastructure import (
    InMemoryContactStore,
    Neo4jContactStore,
    ensure_contact_constraints,
    phone_normalizer,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def _get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def _build_service(app: FastAPI, settings: Settings) -> ContactService:
    if settings.store == STORE_NEO4J:
        app.state.driver = _get_driver(settings)
        ensure_contact_constraints(app.state.driver)
        store = Neo4jContactStore(app.state.driver)
    else:
        store = InMemoryContactStore()
    logger.info("Contact store: %s", settings.store)
    return ContactService(
        store, normalize_number=phone_normalizer(settings.default_region)
    )


def get_service(request: Request) -> ContactService:
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise RuntimeError("Contact service not initialized; start the app through its lifespan")
    return service


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    app.state.driver = None
    owns_service = getattr(app.state, "service", None) is None
    try:
        if owns_service:
            app.state.service = _build_service(app, settings)
        yield
    finally:
        if owns_service:
            app.state.service = None
        if app.state.driver is not None:
            app.state.driver.close()
            app.state.driver = None


app = FastAPI(title="Phonebook API", lifespan=lifespan)


# --- Errors: every failure body is {"error": <message>} ---


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(ContactError)
async def contact_error_handler(request: Request, exc: ContactError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err.get("loc", ())[1:]) or "body"
        problems.append(f"{where}: {err.get('msg', 'invalid')}")
    message = "; ".join(problems) or "Invalid request"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


# --- REST: health and info ---


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/info")
def info(request: Request):
    service = get_service(request)
    return {
        "contacts": service.count_contacts(),
        "date": datetime.now(timezone.utc).isoformat(),
    }


# --- REST: contacts ---


class CreateContactBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    number: str


class UpdateContactBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    number: str
    name: str | None = None


class UpsertContactBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    number: str


class ContactItem(BaseModel):
    id: int
    name: str
    number: str


def _to_item(contact: Contact) -> ContactItem:
    return ContactItem(id=contact.id, name=contact.name, number=contact.number)


@app.get("/contacts")
def list_contacts(request: Request):
    service = get_service(request)
    return [_to_item(c) for c in service.list_contacts()]


@app.get("/contacts/search")
def search_contacts(request: Request, q: str = ""):
    service = get_service(request)
    return [_to_item(c) for c in service.search_contacts(q)]


@app.get("/contacts/{contact_id}")
def get_contact(contact_id: str, request: Request):
    service = get_service(request)
    return _to_item(service.get_contact(parse_contact_id(contact_id)))


@app.post("/contacts", status_code=201)
def create_contact(body: CreateContactBody, request: Request):
    service = get_service(request)
    contact = service.create_contact(body.name, body.number)
    logger.info("Created contact %s (%s)", contact.id, contact.name)
    return _to_item(contact)


@app.put("/contacts/by-name/{name:path}")
def upsert_contact(name: str, body: UpsertContactBody, request: Request):
    service = get_service(request)
    result = service.upsert_by_name(name, body.number)
    action = "Created" if result.created else "Updated"
    logger.info("%s contact %s (%s) by name", action, result.contact.id, result.contact.name)
    return JSONResponse(
        content=_to_item(result.contact).model_dump(),
        status_code=201 if result.created else 200,
    )


@app.put("/contacts/{contact_id}")
def update_contact(contact_id: str, body: UpdateContactBody, request: Request):
    service = get_service(request)
    contact = service.update_contact(
        parse_contact_id(contact_id), body.number, name=body.name
    )
    logger.info("Updated contact %s", contact.id)
    return _to_item(contact)


@app.delete("/contacts/{contact_id}", status_code=204)
def delete_contact(contact_id: str, request: Request):
    service = get_service(request)
    if service.delete_contact(parse_contact_id(contact_id)):
        logger.info("Deleted contact %s", contact_id)
    return Response(status_code=204)
