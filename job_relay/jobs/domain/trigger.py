"""TimerInfo — what the host scheduler tells a job about this invocation."""

from pydantic import BaseModel, ConfigDict


class TimerInfo(BaseModel, frozen=True):
    """``past_due`` is logged when true and otherwise not acted upon."""

    model_config = ConfigDict(frozen=True)

    past_due: bool = False
