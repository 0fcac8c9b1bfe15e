from __future__ import annotations

from advent2023 import config as _config
from advent2023 import errors as _errors
from advent2023 import inputs as _inputs
from advent2023 import runner as _runner
from advent2023 import solution as _solution
from advent2023 import stream as _stream
from advent2023 import stream_utils as _stream_utils
from advent2023 import utils as _utils
from advent2023.config import *
from advent2023.days import solutions
from advent2023.errors import *
from advent2023.inputs import *
from advent2023.runner import *
from advent2023.solution import *
from advent2023.stream import *
from advent2023.stream_utils import *
from advent2023.utils import *

# The `stream` decorator shadows the `advent2023.stream` module attribute.
__all__ = (
    *_config.__all__,
    *_errors.__all__,
    *_inputs.__all__,
    *_runner.__all__,
    *_solution.__all__,
    *_stream.__all__,
    *_stream_utils.__all__,
    *_utils.__all__,
    "solutions",
)
