from typing import Annotated

from fastapi import Query

NetworkQuery = Annotated[str | None, Query(description="Network name or chain id; defaults to the server's network")]
