# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error body shared by every error response."""

from pydantic import BaseModel, Field

HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


class ErrorResponse(BaseModel):
    """Problem Details body (https://datatracker.ietf.org/doc/html/rfc7807).

    ``detail`` carries the endpoint-specific message, e.g.
    "SKU, name and price are required." or "Product not found.".
    """

    type: str = "about:blank"
    title: str = Field(description="Short summary derived from the status code.")
    status: int
    detail: str = ""
    request_id: str = Field(
        default="",
        description="Echo of X-Request-ID, or a generated UUID.",
    )
    instance: str = Field(default="", description="Request path that failed.")

    @classmethod
    def for_status(
        cls, status_code: int, detail: str, request_id: str, instance: str = ""
    ) -> "ErrorResponse":
        return cls(
            title=HTTP_STATUS_TITLES.get(status_code, "Error"),
            status=status_code,
            detail=detail,
            request_id=request_id,
            instance=instance,
        )
