# api_server.py

import threading
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse

from user_cards.dom import Page
from user_cards.errors import UserCardsError
from user_cards.highlight import HighlightController
from user_cards.job import LOAD_FAILED_ALERT, run_page_job
from user_cards.state import AppContext

app = FastAPI(
    title="Random User Cards",
    description="Renders RandomUser records as cards and highlights one by email.",
    version="0.1.0",
)

# One page per process, like one browser tab. The lock delivers requests to it one at a time.
_lock = threading.Lock()
_context: Optional[AppContext] = None


def get_context() -> AppContext:
    global _context
    if _context is None:
        context = AppContext()
        run_page_job(context)  # fetch runs once, on first use
        _context = context
    return _context


def reset_context() -> None:
    global _context
    _context = None


def _page_response(context: AppContext, status_code: int = 200) -> HTMLResponse:
    # Pending alerts are shown once, then dropped.
    return HTMLResponse(context.page.to_html(alerts=context.alert.drain()), status_code=status_code)


@app.exception_handler(UserCardsError)
async def load_failed(request: Request, exc: UserCardsError):
    # No page was ever loaded, so answer with an empty one carrying the alert.
    page = Page.default()
    return HTMLResponse(page.to_html(alerts=[LOAD_FAILED_ALERT]), status_code=502)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def page():
    with _lock:
        return _page_response(get_context())


@app.get("/users")
def users():
    with _lock:
        context = get_context()
        return [record.to_dict() for record in context.state.users]


@app.post("/highlight", response_class=HTMLResponse)
def highlight(email: str = Form("")):
    """
    The page's email input lives in a form, so pressing Enter posts here.
    Any alert comes back as a banner on the re-rendered page.
    """
    with _lock:
        context = get_context()
        context.page.type_email(email)
        HighlightController(context).on_key_press("Enter")
        return _page_response(context)


@app.post("/reload", response_class=HTMLResponse)
def reload():
    """Fetch a fresh set of users; the old cards and any highlight go away."""
    with _lock:
        context = get_context()
        try:
            run_page_job(context)
        except UserCardsError:
            # The previous cards stay up; the alert queued by the job goes out with them.
            return _page_response(context, status_code=502)
        return _page_response(context)


# For running directly: python api_server.py
if __name__ == "__main__":
    import uvicorn

    from user_cards.config import configure_logging

    configure_logging()
    uvicorn.run(app, host="127.0.0.1", port=8000)
