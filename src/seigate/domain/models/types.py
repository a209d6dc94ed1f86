from typing import Annotated

from pydantic import PlainSerializer

# Arbitrary-precision quantity, emitted as a decimal string in JSON
BigInt = Annotated[int, PlainSerializer(str, return_type=str, when_used="json")]
