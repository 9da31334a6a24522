"""Forward each notification to several sinks."""

from typing import Callable


class FanOutSink:
    """Call every wrapped sink, in order, with the same message."""

    def __init__(self, *sinks: Callable[[str], None]) -> None:
        self.sinks = list(sinks)

    def __call__(self, message: str) -> None:
        for sink in self.sinks:
            sink(message)
