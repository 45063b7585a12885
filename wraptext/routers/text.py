"""
Text API Router
Provides endpoints for wrapping, filling, shortening and line utilities.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError
from typing import Optional, Dict, Any, List
import logging
import wraptext.config as config
from wraptext.config import WrapConfigError, WrapOptions
from wraptext import utils
from wraptext.wrapper import TextWrapper

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/text", tags=["text"])


class WrapRequest(BaseModel):
    text: str
    options: Optional[Dict[str, Any]] = None  # Field overrides, e.g. {"width": 20}
    preset: Optional[str] = None


class DedentRequest(BaseModel):
    text: str


class IndentRequest(BaseModel):
    text: str
    prefix: str


class CenterRequest(BaseModel):
    text: str
    pad: str = " "
    width: int


def resolve_wrapper(request: WrapRequest) -> TextWrapper:
    """Build a TextWrapper from a preset (or the defaults) plus request overrides."""
    try:
        options = config.settings.resolve_options(request.preset)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Preset not found: {request.preset}")

    overrides = dict(request.options or {})
    if "tabsize" in overrides:
        overrides["tab_size"] = overrides.pop("tabsize")

    # Validated as data so keys like "self" are rejected like any unknown field
    try:
        return TextWrapper(WrapOptions.model_validate({**options.model_dump(), **overrides}))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid options: {e.errors()[0]['msg']}")


def run_wrapper(request: WrapRequest, action: str):
    """Call TextWrapper.<action> and map configuration errors to HTTP 400."""
    wrapper = resolve_wrapper(request)
    try:
        return getattr(wrapper, action)(request.text)
    except WrapConfigError as e:
        logger.warning(f"Rejected {action} request: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/wrap")
async def wrap_text(request: WrapRequest) -> Dict[str, List[str]]:
    """Wrap text into a list of lines."""
    return {"lines": run_wrapper(request, "wrap")}


@router.post("/fill")
async def fill_text(request: WrapRequest) -> Dict[str, str]:
    """Wrap text into a single newline-separated string."""
    return {"text": run_wrapper(request, "fill")}


@router.post("/shorten")
async def shorten_text(request: WrapRequest) -> Dict[str, str]:
    """Collapse and truncate text to a single line."""
    return {"text": run_wrapper(request, "shorten")}


@router.post("/dedent")
async def dedent_text(request: DedentRequest):
    return {"text": utils.dedent(request.text)}


@router.post("/indent")
async def indent_text(request: IndentRequest):
    return {"text": utils.indent(request.text, request.prefix)}


@router.post("/center")
async def center_text(request: CenterRequest):
    try:
        return {"text": utils.center(request.text, request.pad, request.width)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/presets", response_model=Dict[str, WrapOptions])
async def list_presets():
    """List the configured option presets."""
    return config.settings.presets
