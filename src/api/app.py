from contextlib import asynccontextmanager
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from src import config
from src.api.controller import CampgroundController
from src.api.middleware import MethodOverrideMiddleware
from src.api.pipeline import Fault, Redirect, RequestContext, run_pipeline
from src.api.validation import decode_body, validate_campground
from src.db.database import CampgroundStore

# Configure logging - Adjust format to remove INFO/WARNING prefixes
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

PAGE_NOT_FOUND = "Page not found"

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def render_fault(request: Request, fault: Fault):
    """The one place a fault becomes a page the user sees."""
    return templates.TemplateResponse(
        request, "error.html", {"err": fault}, status_code=fault.status_code
    )


def respond(request: Request, outcome):
    if isinstance(outcome, Fault):
        return render_fault(request, outcome)
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.url, status_code=outcome.status_code)
    return templates.TemplateResponse(
        request, outcome.template, outcome.context, status_code=outcome.status_code
    )


async def body_context(request: Request, **params):
    return RequestContext(
        params=params,
        content_type=request.headers.get("content-type", ""),
        body=await request.body(),
    )


def create_app(store=None):
    """
    Build the application around a campground store.

    Without an explicit store one is created from DB_URL.
    """
    if store is None:
        store = CampgroundStore(config.DATABASE_URL)
    controller = CampgroundController(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            store.create_tables()
        except Exception as e:
            logger.error(f"Database connection error: {str(e)}")
            raise
        logger.info("Database connected")
        yield

    app = FastAPI(
        title="Campground Manager",
        description="Server-rendered pages for listing, creating, editing and deleting campgrounds",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(MethodOverrideMiddleware)
    app.state.store = store

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request):
        return respond(request, await run_pipeline(RequestContext(), controller.home))

    @app.get("/campgrounds", response_class=HTMLResponse)
    async def list_campgrounds(request: Request):
        return respond(request, await run_pipeline(RequestContext(), controller.index))

    @app.get("/campgrounds/new", response_class=HTMLResponse)
    async def new_campground_form(request: Request):
        return respond(request, await run_pipeline(RequestContext(), controller.new_form))

    @app.post("/campgrounds/new")
    async def create_campground(request: Request):
        ctx = await body_context(request)
        outcome = await run_pipeline(ctx, decode_body, validate_campground, controller.create)
        return respond(request, outcome)

    @app.get("/campgrounds/{campground_id}", response_class=HTMLResponse)
    async def show_campground(request: Request, campground_id: str):
        ctx = RequestContext(params={"id": campground_id})
        return respond(request, await run_pipeline(ctx, controller.show))

    @app.get("/campgrounds/{campground_id}/edit", response_class=HTMLResponse)
    async def edit_campground_form(request: Request, campground_id: str):
        ctx = RequestContext(params={"id": campground_id})
        return respond(request, await run_pipeline(ctx, controller.edit_form))

    @app.put("/campgrounds/{campground_id}/edit")
    async def update_campground(request: Request, campground_id: str):
        ctx = await body_context(request, id=campground_id)
        outcome = await run_pipeline(ctx, decode_body, validate_campground, controller.update)
        return respond(request, outcome)

    @app.delete("/campgrounds/{campground_id}")
    async def delete_campground(request: Request, campground_id: str):
        ctx = RequestContext(params={"id": campground_id})
        return respond(request, await run_pipeline(ctx, controller.delete))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # An unknown verb on a known path is reported like an unknown path.
        if exc.status_code in (404, 405):
            return render_fault(request, Fault(PAGE_NOT_FOUND, 404))
        return render_fault(request, Fault(str(exc.detail), exc.status_code))

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
        return render_fault(request, Fault.from_exception(exc))

    return app


app = create_app()
