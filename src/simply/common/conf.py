INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF

FIRST_LINE = 1          # Jump targets are 1-based line numbers
FALLBACK_GLYPH = '·'    # chr of a value that is not a Unicode scalar


def wrap_int32(value: int) -> int:
    return (value - INT32_MIN) % 0x100000000 + INT32_MIN


class RunSettings:
    verbose: bool
    trace: bool

    def __init__(self):
        self.verbose = False
        self.trace = False

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        return self
