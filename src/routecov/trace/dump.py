"""Route coverage dump reader.

Tests running with route coverage enabled write one XML file per test into
the dump directory. Each file holds the route models annotated with runtime
statistics:

<test>
  <routeCoverage>
    <route id="greetings" exchangesTotal="3">
      <from uri="timer:tick" exchangesTotal="3"/>
      <setBody exchangesTotal="3"/>
      <choice exchangesTotal="3">
        <when exchangesTotal="2">
          <to uri="log:hello" exchangesTotal="2"/>
        </when>
        <otherwise exchangesTotal="1">
          <to uri="log:other" exchangesTotal="1"/>
        </otherwise>
      </choice>
    </route>
  </routeCoverage>
</test>

Every element below a matching <route> becomes one (tag, exchangesTotal)
record, in document order. Files are read in sorted name order and the
records of every matching route are concatenated.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from routecov.core.errors import TraceRetrievalError
from routecov.trace.models import TraceRecord

COUNT_ATTRIBUTE = "exchangesTotal"


class DumpTraceProvider:
    """Trace provider backed by a directory of XML coverage dumps."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def load(self, route_id: str) -> list[TraceRecord]:
        """Collect the trace records of a route from every dump file."""
        if not self._directory.is_dir():
            return []

        records: list[TraceRecord] = []
        for path in sorted(self._directory.glob("*.xml")):
            root = self._parse_file(path, route_id)
            for route in root.iter("route"):
                if route.get("id") == route_id:
                    records.extend(self._route_records(route, path, route_id))
        return records

    def _parse_file(self, path: Path, route_id: str) -> ET.Element:
        try:
            return ET.parse(path).getroot()
        except ET.ParseError as e:
            raise TraceRetrievalError.invalid_dump(str(path), route_id, str(e)) from e
        except OSError as e:
            raise TraceRetrievalError.invalid_dump(
                str(path), route_id, f"failed to read file: {e}"
            ) from e

    def _route_records(self, route: ET.Element, path: Path, route_id: str) -> list[TraceRecord]:
        records = []
        for elem in route.iter():
            if elem is route:
                continue
            raw = elem.get(COUNT_ATTRIBUTE, "0")
            try:
                count = int(raw)
            except ValueError as e:
                raise TraceRetrievalError.invalid_dump(
                    str(path), route_id, f"invalid {COUNT_ATTRIBUTE}={raw!r} on <{elem.tag}>"
                ) from e
            records.append(TraceRecord(name=elem.tag, count=count))
        return records
