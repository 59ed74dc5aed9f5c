from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from brands import get_brand, list_brands
from config import Settings, load_settings
from content_store import (
    AppState,
    ConfirmationRequired,
    NotFound,
    ValidationFailed,
    build_post,
    create_app_state,
)
from models import (
    STANDARD_TEMPLATES,
    CaptionRequest,
    CaptionResponse,
    CustomTemplate,
    CustomTemplateCreate,
    DashboardResponse,
    DescriptionRequest,
    DescriptionResponse,
    Listing,
    PostCreate,
    PropertyDetails,
    RenderRequest,
    SocialPost,
    UploadResponse,
)
from models_branding import BrandSettings
from rendering import (
    RenderRuntimeUnavailable,
    build_card_html,
    render_card_png,
    render_custom_template,
    render_template,
)
from rendering.nodes import Node
from services.ai_content import AIContentClient, AIContentConfig
from services.media import MediaError, image_to_data_url

_LOG = logging.getLogger(__name__)

VERSION = "0.1.0"

settings: Settings = load_settings()

app = FastAPI(title="Listing Studio Backend", version=VERSION)
app.state.content = create_app_state(seed=True)
app.state.ai_client = AIContentClient(
    AIContentConfig(
        api_key=settings.openai_api_key,
        model=settings.caption_model,
        timeout_s=settings.ai_timeout_s,
    )
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logging.getLogger("uvicorn.error").info(
            "request_id=%s method=%s path=%s status=%s duration_ms=%.0f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        response.headers["X-Request-Id"] = request_id
        return response


app.add_middleware(RequestLogMiddleware)


@app.on_event("startup")
def startup_log() -> None:
    log = logging.getLogger("uvicorn.error")
    log.info("Backend starting (OPENAI_API_KEY configured: %s) version=%s", settings.ai_enabled, VERSION)
    if not settings.ai_enabled:
        log.warning("OPENAI_API_KEY is not set. Captions and descriptions will use template fallbacks.")


def get_state(request: Request) -> AppState:
    return request.app.state.content


def get_ai_client(request: Request) -> AIContentClient:
    return request.app.state.ai_client


# --- Error mapping ---

@app.exception_handler(ValidationFailed)
def _validation_failed(request: Request, exc: ValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc), "fields": exc.fields})


@app.exception_handler(ConfirmationRequired)
def _confirmation_required(request: Request, exc: ConfirmationRequired) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc), "confirm": "Repeat the request with ?confirm=true"})


@app.exception_handler(NotFound)
def _not_found(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# --- Health ---

@app.get("/health")
def health():
    return {"status": "ok", "ai_enabled": settings.ai_enabled, "version": VERSION}


# --- Templates ---

@app.get("/templates")
def list_templates(state: AppState = Depends(get_state)):
    """Standard gallery (id + label) and the saved custom templates."""
    return {
        "standard": [{"id": tid.value, "label": label} for tid, label in STANDARD_TEMPLATES],
        "custom": [t.model_dump(mode="json") for t in state.templates.list()],
    }


@app.post("/templates/custom", response_model=CustomTemplate, status_code=201)
def create_custom_template(req: CustomTemplateCreate, state: AppState = Depends(get_state)) -> CustomTemplate:
    return state.templates.create(req, brand=state.get_brand())


@app.delete("/templates/custom/{template_id}", status_code=204)
def delete_custom_template(template_id: str, confirm: bool = False, state: AppState = Depends(get_state)) -> Response:
    state.templates.delete(template_id, confirm=confirm)
    return Response(status_code=204)


# --- Rendering ---

def _resolve_render(req: RenderRequest, state: AppState) -> tuple[Node, BrandSettings | None]:
    brand = req.brand
    if brand is None and req.use_brand_kit:
        brand = state.get_brand()
    try:
        saved = state.templates.get(req.template_id)
    except NotFound:
        saved = None
    if saved is not None:
        if req.config is not None:
            saved = saved.model_copy(update={"config": req.config})
        node = render_custom_template(saved, req.property_data, brand)
    else:
        node = render_template(req.template_id, req.property_data, brand, req.config)
    return node, brand


def _font_for(brand: BrandSettings | None) -> str:
    return brand.font_family if brand else "Inter"


@app.post("/render/preview", response_class=HTMLResponse)
def render_preview(req: RenderRequest, state: AppState = Depends(get_state)) -> HTMLResponse:
    """Standalone card HTML (no browser runtime needed)."""
    node, brand = _resolve_render(req, state)
    return HTMLResponse(build_card_html(node, font_family=_font_for(brand)))


@app.post("/render/png")
def render_png(req: RenderRequest, state: AppState = Depends(get_state)) -> Response:
    node, brand = _resolve_render(req, state)
    html_str = build_card_html(node, font_family=_font_for(brand))
    try:
        png_bytes = render_card_png(html_str)
    except RenderRuntimeUnavailable as e:
        _LOG.warning("[render] PNG runtime unavailable: %s", e)
        raise HTTPException(
            status_code=503,
            detail="PNG export requires Playwright: pip install playwright && playwright install chromium. "
            "Use POST /render/preview for HTML.",
        ) from e
    return Response(
        content=png_bytes,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{req.template_id}.png"'},
    )


@app.get("/render/custom/{template_id}/preview", response_class=HTMLResponse)
def render_saved_template(
    template_id: str,
    listing_id: Optional[str] = Query(None),
    state: AppState = Depends(get_state),
) -> HTMLResponse:
    """Saved template applied to a listing (first listing, or a sample, when none is given)."""
    template = state.templates.get(template_id)
    if listing_id:
        details = state.listings.get(listing_id).property_details()
    else:
        listings = state.listings.list()
        details = listings[0].property_details() if listings else PropertyDetails(
            address="8800 Sunset Blvd, LA", price="$1,200,000", beds=2, baths=2, sqft=1400
        )
    brand = state.get_brand()
    node = render_custom_template(template, details, brand)
    return HTMLResponse(build_card_html(node, font_family=brand.font_family, title=template.name))


# --- Listings ---

@app.get("/listings", response_model=list[Listing])
def list_listings(search: Optional[str] = None, state: AppState = Depends(get_state)) -> list[Listing]:
    return state.listings.list(search)


@app.post("/listings", response_model=Listing, status_code=201)
def create_listing(listing: Listing, state: AppState = Depends(get_state)) -> Listing:
    return state.listings.add(listing)


@app.get("/listings/{listing_id}", response_model=Listing)
def get_listing(listing_id: str, state: AppState = Depends(get_state)) -> Listing:
    return state.listings.get(listing_id)


@app.put("/listings/{listing_id}", response_model=Listing)
def update_listing(listing_id: str, listing: Listing, state: AppState = Depends(get_state)) -> Listing:
    return state.listings.update(listing.model_copy(update={"id": listing_id}))


@app.delete("/listings/{listing_id}", status_code=204)
def delete_listing(listing_id: str, confirm: bool = False, state: AppState = Depends(get_state)) -> Response:
    state.listings.delete(listing_id, confirm=confirm)
    return Response(status_code=204)


# --- Posts ---

@app.get("/posts", response_model=list[SocialPost])
def list_posts(state: AppState = Depends(get_state)) -> list[SocialPost]:
    return state.posts.list()


@app.post("/posts", response_model=SocialPost)
def save_post(req: PostCreate, state: AppState = Depends(get_state)) -> SocialPost:
    """Create, or replace in place when the id already exists."""
    return state.posts.save(build_post(req))


@app.delete("/posts/{post_id}", status_code=204)
def delete_post(post_id: str, confirm: bool = False, state: AppState = Depends(get_state)) -> Response:
    state.posts.delete(post_id, confirm=confirm)
    return Response(status_code=204)


@app.get("/dashboard", response_model=DashboardResponse)
def dashboard(state: AppState = Depends(get_state)) -> DashboardResponse:
    return DashboardResponse(stats=state.posts.stats(), recent_posts=state.posts.recent())


# --- Brand kit ---

@app.get("/brand", response_model=BrandSettings)
def get_brand_kit(state: AppState = Depends(get_state)) -> BrandSettings:
    return state.get_brand()


@app.put("/brand", response_model=BrandSettings)
def save_brand_kit(settings_in: BrandSettings, state: AppState = Depends(get_state)) -> BrandSettings:
    return state.save_brand(settings_in)


@app.get("/brands")
def get_brands_list():
    """Built-in brand kits for the settings dropdown."""
    return [{"brand_id": brand_id, **b.model_dump()} for brand_id, b in list_brands()]


@app.put("/brand/preset/{brand_id}", response_model=BrandSettings)
def apply_brand_preset(brand_id: str, state: AppState = Depends(get_state)) -> BrandSettings:
    preset = get_brand(brand_id)
    if preset is None:
        raise NotFound("brand", brand_id)
    return state.save_brand(preset)


# --- AI content ---

@app.post("/ai/caption", response_model=CaptionResponse)
def generate_caption(req: CaptionRequest, ai: AIContentClient = Depends(get_ai_client)) -> CaptionResponse:
    if not req.platforms:
        raise ValidationFailed(["platforms"], "Please select at least one platform.")
    result = ai.generate_caption(req.property_details, req.platforms, req.tone)
    return CaptionResponse(
        caption=result.caption,
        hashtags=result.hashtags,
        source=result.source,
        warnings=result.warnings,
    )


@app.post("/ai/description", response_model=DescriptionResponse)
def optimize_description(req: DescriptionRequest, ai: AIContentClient = Depends(get_ai_client)) -> DescriptionResponse:
    text, warnings = ai.optimize_description(req.text)
    return DescriptionResponse(text=text, optimized=bool(req.text.strip()) and not warnings, warnings=warnings)


# --- Media ---

@app.post("/media/upload", response_model=UploadResponse)
def upload_media(file: UploadFile = File(...)) -> UploadResponse:
    try:
        contents = file.file.read()
    except OSError as e:
        raise HTTPException(status_code=400, detail=f"Failed to read file: {e}") from e
    try:
        url, content_type = image_to_data_url(contents, file.content_type, file.filename)
    except MediaError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    _LOG.info("[media] upload filename=%r content_type=%s size_bytes=%d", file.filename, content_type, len(contents))
    return UploadResponse(url=url, content_type=content_type, size_bytes=len(contents))
