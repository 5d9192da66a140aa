from __future__ import annotations

from fastapi import FastAPI, Form
from fastapi.responses import JSONResponse

from modules.base_convert.core.base import convert_base
from modules.base_convert.core.errors import BaseConvertError, InvalidInputError
from modules.base_convert.core.replace import convert_and_replace
from modules.base_convert.core.settings import get_settings
from universe.errors import install_error_handlers
from universe.logger import get_logger

app = FastAPI(title="Base Converter")
install_error_handlers(app, domain_errors=(BaseConvertError,))

logger = get_logger("base_convert.tool")


def _optional_int(value: str | None, label: str) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise InvalidInputError(f"{label} must be a number.") from None


@app.get("/")
def index():
    return {
        "name": "base_convert",
        "title": "Base Converter",
        "settings": get_settings().model_dump(),
    }


@app.post("/convert")
def convert(
    value: str | None = Form(None),
    base_from: str | None = Form(None),
    base_to: str | None = Form(None),
):
    result, error = convert_base(value, base_from, base_to)
    if error:
        logger.warning("base_convert.rejected", value=value, error=error)
        return JSONResponse({"error": error}, status_code=400)
    logger.info(
        "base_convert.converted",
        base_from=result["base_from"],
        base_to=result["base_to"],
    )
    return result


@app.post("/replace")
def replace(
    text: str = Form(...),
    start: str | None = Form(None),
    end: str | None = Form(None),
    cursor: str | None = Form(None),
    base_from: str | None = Form(None),
    base_to: str | None = Form(None),
):
    start_int = _optional_int(start, "Start")
    end_int = _optional_int(end, "End")
    bounds = None
    if start_int is not None or end_int is not None:
        if start_int is None or end_int is None:
            return JSONResponse({"error": "Start and end go together."}, status_code=400)
        bounds = (start_int, end_int)

    new_text, (new_start, new_end) = convert_and_replace(
        text,
        bounds,
        _optional_int(base_to, "To base"),
        cursor=_optional_int(cursor, "Cursor"),
        source_base=_optional_int(base_from, "From base"),
    )
    logger.info("base_convert.replaced", start=new_start, end=new_end)
    return {"text": new_text, "start": new_start, "end": new_end}
