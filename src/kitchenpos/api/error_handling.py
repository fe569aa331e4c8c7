from __future__ import annotations

import logging
from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from kitchenpos.api.middleware.request_id import get_request_id
from kitchenpos.application.errors import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.application.use_cases.menus import (
    InvalidMenuError,
    MenuGroupNotFoundError,
    MenuNotFoundError,
)
from kitchenpos.application.use_cases.order_tables import (
    EmptyTableGuestsError,
    InvalidNumberOfGuestsError,
    InvalidTableNameError,
    OrderTableNotFoundError,
    TableHasActiveOrdersError,
    TableInGroupError,
)
from kitchenpos.application.use_cases.order_transitions import (
    InvalidOrderTransitionError,
    OrderNotFoundError,
)
from kitchenpos.application.use_cases.place_order import (
    EmptyOrderLineItemsError,
    EmptyTableOrderError,
    InvalidOrderQuantityError,
    InvalidOrderTypeError,
    MenuNotDisplayedError,
    MissingDeliveryAddressError,
    OrderMenuMismatchError,
    OrderPriceMismatchError,
    TableNotFoundError,
)
from kitchenpos.application.use_cases.table_groups import (
    TableGroupHasActiveOrdersError,
    TableGroupNotFoundError,
    TableGroupSizeError,
    TableGroupTablesMismatchError,
    TableNotGroupableError,
)

logger = logging.getLogger("kitchenpos.api.errors")


def _error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
            "requestId": get_request_id(),
        },
    )


def _exception_handler(status_code: int, code: str):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        details = getattr(exc, "details", None)
        logger.info(
            "request_rejected",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "error_code": code,
            },
        )
        return _error_response(
            status_code=status_code,
            code=code,
            message=str(exc),
            details=details if isinstance(details, dict) else None,
        )

    return handler


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else "request failed"
    code = "HTTP_ERROR"
    if http_exc.status_code == 404:
        code = "NOT_FOUND"
    elif http_exc.status_code == 400:
        code = "BAD_REQUEST"
    elif http_exc.status_code == 405:
        code = "METHOD_NOT_ALLOWED"
    elif http_exc.status_code == 409:
        code = "CONFLICT"
    return _error_response(
        status_code=http_exc.status_code,
        code=code,
        message=message,
    )


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    return _error_response(
        status_code=400,
        code="INVALID_REQUEST",
        message="request validation failed",
        details={"errors": validation_exc.errors()},
    )


def register_exception_handlers(app: FastAPI) -> None:
    mappings: list[tuple[type[Exception], int, str]] = [
        (InvalidOrderTypeError, 400, "INVALID_ORDER_TYPE"),
        (EmptyOrderLineItemsError, 400, "EMPTY_ORDER_LINE_ITEMS"),
        (OrderMenuMismatchError, 400, "ORDER_MENU_MISMATCH"),
        (InvalidOrderQuantityError, 400, "INVALID_ORDER_QUANTITY"),
        (MenuNotDisplayedError, 400, "MENU_NOT_DISPLAYED"),
        (OrderPriceMismatchError, 400, "ORDER_PRICE_MISMATCH"),
        (MissingDeliveryAddressError, 400, "MISSING_DELIVERY_ADDRESS"),
        (MenuNotFoundError, 404, "MENU_NOT_FOUND"),
        (MenuGroupNotFoundError, 404, "MENU_GROUP_NOT_FOUND"),
        (InvalidMenuError, 400, "INVALID_MENU"),
        (TableNotFoundError, 404, "TABLE_NOT_FOUND"),
        (OrderTableNotFoundError, 404, "TABLE_NOT_FOUND"),
        (EmptyTableOrderError, 409, "TABLE_EMPTY"),
        (EmptyTableGuestsError, 409, "TABLE_EMPTY"),
        (InvalidTableNameError, 400, "INVALID_TABLE_NAME"),
        (InvalidNumberOfGuestsError, 400, "INVALID_NUMBER_OF_GUESTS"),
        (TableInGroupError, 400, "TABLE_IN_GROUP"),
        (TableHasActiveOrdersError, 400, "TABLE_HAS_ACTIVE_ORDERS"),
        (OrderNotFoundError, 404, "ORDER_NOT_FOUND"),
        (InvalidOrderTransitionError, 409, "INVALID_ORDER_TRANSITION"),
        (TableGroupSizeError, 400, "TABLE_GROUP_TOO_SMALL"),
        (TableGroupTablesMismatchError, 400, "TABLE_GROUP_TABLES_MISMATCH"),
        (TableNotGroupableError, 400, "TABLE_NOT_GROUPABLE"),
        (TableGroupHasActiveOrdersError, 400, "TABLE_GROUP_HAS_ACTIVE_ORDERS"),
        (TableGroupNotFoundError, 404, "TABLE_GROUP_NOT_FOUND"),
        # Fallbacks for any error kind without a dedicated code.
        (InvalidArgumentError, 400, "INVALID_ARGUMENT"),
        (NotFoundError, 404, "NOT_FOUND"),
        (IllegalStateError, 409, "ILLEGAL_STATE"),
    ]

    for exc_cls, status_code, code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code))

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
