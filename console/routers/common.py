from fastapi import HTTPException, status

from core.errors import ConsoleError, to_http_exception
from views.base import PageView


async def load_page(view: PageView) -> PageView:
    """Initial page load; any failure replaces the whole page with an error."""
    await view.load()
    raise_for_page_error(view)
    return view


def raise_for_page_error(view: PageView) -> None:
    if view.error:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=view.error)


async def run_action(view: PageView, action) -> None:
    """Run a view mutation and turn its failure into an HTTP error.

    Once the remote service accepted the change the request succeeds; a failed
    reload afterwards only shows up as the snapshot's `error`.
    """
    try:
        await action
    except ConsoleError as e:
        raise to_http_exception(e) from e
