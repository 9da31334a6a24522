"""JSON Lines sink for keeping a notification log on disk."""

import json
from pathlib import Path

from bank_ledger.models.notification import Notification
from bank_ledger.sinks.serialization import to_dict


class JsonLinesSink:
    """Append one JSON object per notification to a ``.jsonl`` file."""

    def __init__(self, path: str | Path, name: str = "jsonl") -> None:
        """Initialize JSON Lines sink.

        Parameters
        ----------
        path : str | Path
            File to append to. Parent directories are created.
        name : str
            Source name stamped on each notification.
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.name = name
        self._file = open(self.path, "a", encoding="utf-8")
        self.count = 0

    def __call__(self, message: str) -> None:
        data = to_dict(Notification(message=message, source=self.name))
        self._file.write(json.dumps(data, ensure_ascii=False) + "\n")
        self._file.flush()
        self.count += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "JsonLinesSink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
