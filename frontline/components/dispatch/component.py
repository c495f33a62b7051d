"""
Dispatch component - run a named request and collect its output.

Entry point used by the HTTP and CLI shells. Caller-visible failures
(unknown request, configuration defects) become a status on the output
instead of an exception, so shells only map statuses to responses.
"""

from __future__ import annotations

import logging

from frontline.core.errors import ConfigurationError, RequestNotFoundError
from frontline.core.output import StringOutput

from ._impl import Dispatcher
from .models import DispatchOutput, DispatchStatus, HandleRequestInput

logger = logging.getLogger(__name__)


def run(inp: HandleRequestInput, *, dispatcher: Dispatcher) -> DispatchOutput:
    """
    Dispatch a request into a string buffer.

    Args:
        inp: Request name, optional initial context and parameter sources.
        dispatcher: Configured dispatcher.

    Returns:
        DispatchOutput with the rendered body and final context.
    """
    out = StringOutput()

    try:
        context = dispatcher.handle_request(
            inp.request_name,
            inp.initial_context,
            sources=inp.sources,
            out=out,
        )
    except RequestNotFoundError as e:
        logger.info(f"Request not found: {e.request_name}")
        return DispatchOutput(
            request_name=inp.request_name,
            body=out.getvalue(),
            status=DispatchStatus.NOT_FOUND,
            error=str(e),
        )
    except ConfigurationError as e:
        logger.error(f"Configuration error while dispatching {inp.request_name}: {e}")
        return DispatchOutput(
            request_name=inp.request_name,
            body=out.getvalue(),
            status=DispatchStatus.CONFIG_ERROR,
            error=str(e),
        )

    return DispatchOutput(
        request_name=inp.request_name,
        body=out.getvalue(),
        status=DispatchStatus.OK,
        context=context,
    )
