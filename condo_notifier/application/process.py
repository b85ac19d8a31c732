"""Application orchestration for package lookup and delivery.

Mental model refresher:
- Application layer coordinates use-case flow across domain modules.
- In this project it:
  1) resolves asset URLs through the locator
  2) composes the message text when the caller did not supply one
  3) hands recipient, message and URLs to the configured dispatcher
- Failures come back as a uniform `{"error": ...}` result holding only the
  opaque error message; causes were already logged by the domain layer.
"""

from __future__ import annotations

from ..domain.assets import AssetLocator
from ..domain.dispatch import Dispatcher
from ..domain.message import compose_package_message
from ..errors import NotifierError
from ..types import PackageRequest, PipelineResult


def find_package_assets(request: PackageRequest, locator: AssetLocator) -> PipelineResult:
    """Lookup-only mode: return the matching asset URLs."""
    try:
        urls = locator.locate(request["property_id"], request["size_filter"])
    except NotifierError as exc:
        return {"error": exc.message}
    return {"urls": urls}


def send_package(
    request: PackageRequest,
    locator: AssetLocator,
    dispatcher: Dispatcher,
) -> PipelineResult:
    """Full dispatch mode: look up assets, then deliver them to one recipient."""
    recipient = request.get("recipient")
    if not recipient:
        raise ValueError("send_package requires a recipient")

    try:
        urls = locator.locate(request["property_id"], request["size_filter"])
        message = request.get("message") or compose_package_message(
            request.get("display_name"),
            request["property_id"],
            request["size_filter"],
            len(urls),
        )
        dispatcher.dispatch(recipient, message, urls)
    except NotifierError as exc:
        return {"error": exc.message}
    return {"success": True, "urls": urls}
