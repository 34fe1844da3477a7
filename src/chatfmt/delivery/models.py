"""Delivery outcome models."""

from pydantic import BaseModel, Field


class DeliveryFailure(BaseModel):
    """One delivery that raised."""

    recipient: str = Field(description="Recipient name, or '*' for a broadcast")
    message: str = Field(description="Source message that failed to deliver")
    error: str = Field(description="Exception type and text")


class DeliveryReport(BaseModel):
    """Outcome of a fan-out call.

    A failed delivery is recorded here instead of interrupting the others.
    """

    delivered: int = Field(default=0, ge=0, description="Successful display/broadcast calls")
    failures: list[DeliveryFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def attempted(self) -> int:
        return self.delivered + len(self.failures)

    def record_success(self) -> None:
        self.delivered += 1

    def record_failure(self, recipient: str, message: str, error: Exception) -> None:
        self.failures.append(
            DeliveryFailure(
                recipient=recipient,
                message=message,
                error=f"{type(error).__name__}: {error}",
            )
        )
