"""Writes selected frame statistics to a CSV file, one row per frame."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Optional, Union

from ..frame_data import FrameData
from ..traits import FrameProcessor

_DROP_REASON_COLUMN = "drop_reason"


class CSVFrameDataSerializer(FrameProcessor[FrameData]):
    """Appends a row of chosen statistics for every frame, flushing each time.

    Missing statistics and absent drop reasons are written as empty fields.
    The header row is written with the first frame.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file, lineterminator="\n")
        self._values_to_log: list[str] = []
        self._columns_written = False
        self._log_drop_reason = False

    def log(self, value: str) -> "CSVFrameDataSerializer":
        self._values_to_log.append(value)
        return self

    def log_drop_reason(self) -> "CSVFrameDataSerializer":
        self._log_drop_reason = True
        return self

    async def process(self, frame_data: FrameData) -> Optional[FrameData]:
        if not self._columns_written:
            columns = list(self._values_to_log)
            if self._log_drop_reason:
                columns.append(_DROP_REASON_COLUMN)
            self._writer.writerow(columns)
            self._columns_written = True

        record = []
        for key in self._values_to_log:
            value = frame_data.get_opt(key)
            record.append("" if value is None else str(value))
        if self._log_drop_reason:
            reason = frame_data.drop_reason
            record.append("" if reason is None else str(reason))

        self._writer.writerow(record)
        self._file.flush()
        return frame_data

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "CSVFrameDataSerializer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()