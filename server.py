"""
Web Server for PhiloTrans
FastAPI-based web interface for translation, image analysis and visual synthesis
"""
from datetime import datetime
from pathlib import Path
from typing import Optional
from pydantic import BaseModel

from fastapi import FastAPI, File, Form, UploadFile, HTTPException
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from rich.console import Console
import uvicorn

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent))

from config import SERVER_HOST, SERVER_PORT, WEB_DIR
from philotrans.auth import EnvKeySelector, ensure_authorized, is_authorization_error
from philotrans.display import to_html
from philotrans.errors import (
    AuthorizationError,
    InputRejectedError,
    NoImageProducedError,
    UnsupportedInputError,
)
from philotrans.exporter import ExportFormat, ExportFormatter, ExportKind
from philotrans.gemini_client import GeminiClient
from philotrans.importer import detect_source_format, import_file
from philotrans.registry import ImageSize, TranslationSpeed, model_table

console = Console()

# User-facing messages
TRANSLATION_ERROR = "An error occurred during translation. Please try again."
ANALYSIS_ERROR = "Failed to analyze image. Please ensure it is a valid image file."
AUTH_ERROR = "Authentication failed. Please try selecting the API key again."
NO_IMAGE_ERROR = "No image was generated. Try a different prompt."
IMAGE_ERROR = "Failed to generate image. Please try again."
DEFINITION_ERROR = "Error fetching definition."
NO_DEFINITION = "No definition found."

# Initialize FastAPI app
app = FastAPI(
    title="PhiloTrans",
    description="Philosophical English-Turkish translation studio",
    version="1.0.0"
)

key_selector = EnvKeySelector()
exporter = ExportFormatter()
_client: Optional[GeminiClient] = None


def get_client() -> GeminiClient:
    """Lazily create the shared Gemini client with the currently selected key"""
    global _client
    if _client is None or _client.api_key != key_selector.api_key:
        _client = GeminiClient(api_key=key_selector.api_key)
    return _client


class DefineRequest(BaseModel):
    term: str


class ImagineRequest(BaseModel):
    prompt: str
    size: ImageSize = ImageSize.SIZE_1K


class ExportRequest(BaseModel):
    text: str
    source_format: ExportFormat = ExportFormat.TEXT
    kind: ExportKind = ExportKind.TRANSLATION


@app.get("/", response_class=HTMLResponse)
async def home():
    """Serve the main web interface"""
    html_path = WEB_DIR / "index.html"
    return html_path.read_text(encoding="utf-8")


@app.get("/api/status")
async def api_status():
    """Check API status"""
    return {
        "status": "ok",
        "api_key_set": key_selector.has_selected_api_key(),
        "models": model_table(),
        "stats": _client.get_stats() if _client else None,
        "timestamp": datetime.now().isoformat(),
    }


@app.post("/api/authorize")
async def authorize():
    """Run the key-selection flow"""
    return {"authorized": ensure_authorized(key_selector)}


@app.post("/api/translate")
async def translate(
    text: str = Form(""),
    speed: TranslationSpeed = Form(TranslationSpeed.DEEP),
    file: Optional[UploadFile] = File(None),
):
    """Translate text, a text/Word document, a PDF or an image"""
    attachment = None
    source_format = ExportFormat.TEXT
    if file is not None and file.filename:
        content = await file.read()
        try:
            imported = import_file(file.filename, content, file.content_type)
        except UnsupportedInputError as e:
            raise HTTPException(status_code=400, detail=str(e))
        source_format = imported.source_format
        attachment = imported.attachment
        if imported.text is not None:
            text = imported.text

    if not text.strip() and attachment is None:
        raise HTTPException(status_code=400, detail="Enter text or upload a file to translate")

    try:
        translation = await get_client().translate(text, attachment, speed)
    except InputRejectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        console.print(f"[red]❌ Translation Error: {e}[/red]")
        return {"success": False, "error": TRANSLATION_ERROR}

    return {
        "success": True,
        "text": translation,
        "html": to_html(translation),
        "source_format": source_format.value,
    }


@app.post("/api/define")
async def define(request: DefineRequest):
    """Grounded definition of a philosophical term"""
    if not request.term.strip():
        raise HTTPException(status_code=400, detail="Enter a term to look up")

    try:
        result = await get_client().define_term(request.term)
    except Exception as e:
        console.print(f"[red]❌ Definition Error: {e}[/red]")
        return {"success": False, "error": DEFINITION_ERROR, "urls": []}

    definition = result.definition or NO_DEFINITION
    return {
        "success": True,
        "text": definition,
        "html": to_html(definition),
        "urls": result.urls,
    }


@app.post("/api/analyze")
async def analyze(
    file: UploadFile = File(...),
    prompt: str = Form(""),
):
    """Translate text inside an image or interpret its symbolism"""
    content = await file.read()
    try:
        imported = import_file(file.filename, content, file.content_type)
    except UnsupportedInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if imported.attachment is None or not imported.attachment.is_image:
        raise HTTPException(status_code=400, detail="Upload an image (JPG, PNG, WebP) to analyze")

    try:
        analysis = await get_client().analyze_image(imported.attachment, prompt or None)
    except Exception as e:
        console.print(f"[red]❌ Image Analysis Error: {e}[/red]")
        return {"success": False, "error": ANALYSIS_ERROR}

    return {
        "success": True,
        "text": analysis,
        "html": to_html(analysis),
        "source_format": detect_source_format(file.content_type, file.filename).value,
    }


@app.post("/api/imagine")
async def imagine(request: ImagineRequest):
    """Generate an image for a philosophical concept"""
    if not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Describe the concept to visualize")

    try:
        if not ensure_authorized(key_selector):
            raise AuthorizationError("No API key selected")
        image = await get_client().generate_image(request.prompt, request.size)
    except AuthorizationError as e:
        console.print(f"[yellow]🔑 Image Gen Error: {e}[/yellow]")
        return {"success": False, "error": AUTH_ERROR}
    except NoImageProducedError as e:
        console.print(f"[yellow]⚠️ Image Gen Error: {e}[/yellow]")
        return {"success": False, "error": NO_IMAGE_ERROR}
    except Exception as e:
        console.print(f"[red]❌ Image Gen Error: {e}[/red]")
        if is_authorization_error(e):
            return {"success": False, "error": AUTH_ERROR}
        return {"success": False, "error": IMAGE_ERROR}

    return {
        "success": True,
        "image_url": image.data_url,
        "mime_type": image.mime_type,
        "download_filename": image.download_filename(),
    }


@app.post("/api/export")
async def export(request: ExportRequest):
    """Download the result in the format of the original input"""
    try:
        exported = exporter.format(request.text, request.source_format, request.kind)
        return Response(
            content=exported.content,
            media_type=exported.media_type,
            headers={
                "Content-Disposition": f"attachment; filename=\"{exported.filename}\""
            }
        )
    except Exception as e:
        console.print(f"[red]❌ Export Error: {e}[/red]")
        raise HTTPException(status_code=500, detail=f"Could not export {request.source_format.value} file")


if WEB_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(WEB_DIR)), name="static")


def run_server(host: str = SERVER_HOST, port: int = SERVER_PORT):
    """Run the web server"""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
