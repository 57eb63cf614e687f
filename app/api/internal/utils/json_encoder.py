# Standard library imports
from typing import Any

# Third-party imports
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class CustomJSONResponse(JSONResponse):
    """
    JSON response that drops null data, error and error.details keys from
    BaseResponse envelopes and encodes UUIDs, datetimes and enums the way FastAPI does.
    """

    def render(self, content: Any) -> bytes:
        json_content = jsonable_encoder(content)

        if isinstance(json_content, dict) and "ok" in json_content:
            if json_content.get("data") is None:
                json_content.pop("data", None)
            if json_content.get("error") is None:
                json_content.pop("error", None)
            elif json_content["error"].get("details") is None:
                json_content["error"].pop("details", None)

        return super().render(json_content)
