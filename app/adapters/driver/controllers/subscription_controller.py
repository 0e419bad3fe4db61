from pathlib import Path
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from infra.settings import settings
from app.domain.entities import SubscriptionRequest
from app.domain.services.notification_dispatcher import NotificationDispatcher
from app.domain.services.subscription_service import SubscriptionService
from app.adapters.driven.mail_transport_smtp import SmtpMailTransport
from app.adapters.driven.email_composer_default import DefaultEmailComposer

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

_transport = SmtpMailTransport()
_composer = DefaultEmailComposer()
_dispatcher = NotificationDispatcher(transport=_transport, composer=_composer)
_service = SubscriptionService(dispatcher=_dispatcher, product=settings.PRODUCT_NAME)

def _default_prompt() -> str:
    return f"Stay informed via the {settings.PRODUCT_NAME} mailing list →"

def _render(request: Request, msg: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"product": settings.PRODUCT_NAME, "msg": msg},
    )

@router.get("/", response_class=HTMLResponse)
def get_page(request: Request):
    return _render(request, _default_prompt())

@router.post("/", response_class=HTMLResponse)
def post_subscribe(request: Request, name: str = Form(""), address: str = Form("")):
    data = SubscriptionRequest(name=name, address=address)
    status = _service.execute(data)
    return _render(request, status.text)

@router.get("/health")
def health():
    return {"ok": True}
