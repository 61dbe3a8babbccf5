"""Scenario definitions for representative JSON inputs.

This module defines record streams that exercise the interesting parts of
the conversion: nested objects, arrays, nulls, heterogeneous records and the
different ways of choosing output columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .converter import Options


@dataclass(frozen=True)
class Scenario:
    """A conversion scenario.

    Attributes
    ----------
    name : str
        Unique identifier for the scenario.
    description : str
        Human-readable description of what the scenario tests.
    data : str
        Raw JSON input text.
    columns : Tuple[str, ...], optional
        Explicit output columns (default: discover from the input).
    scan_all : bool, optional
        Discover columns from every record (default: True).
    lowercase_keys : bool, optional
        Lowercase column names (default: True).
    expected : str, optional
        Expected CSV output, when the scenario pins it down exactly.
    """
    name: str
    description: str
    data: str
    columns: Tuple[str, ...] = ()
    scan_all: bool = True
    lowercase_keys: bool = True
    expected: str | None = None

    def options(self) -> Options:
        return Options(
            columns=self.columns,
            scan_all=self.scan_all,
            lowercase_keys=self.lowercase_keys,
        )


def get_scenarios() -> List[Scenario]:
    """Get all available conversion scenarios.

    Returns
    -------
    List[Scenario]
        Scenario definitions covering common JSON record streams.
    """
    return [
        Scenario(
            name="nested_objects",
            description="Nested object collapses into a dotted column.",
            data='{"a":"x","b":{"c":1}}\n',
            expected="a,b.c\nx,1\n",
        ),
        Scenario(
            name="null_value",
            description="JSON null renders as the literal text null.",
            data='{"v":null}\n',
            expected="v\nnull\n",
        ),
        Scenario(
            name="explicit_columns",
            description="Explicit columns keep their order; missing ones are empty.",
            data='{"a":"1","b":"2"}\n',
            columns=("a", "z"),
            expected="a,z\n1,\n",
        ),
        Scenario(
            name="array_value",
            description="Arrays are kept as compact JSON text in a single cell.",
            data='{"arr":[1,"x",null]}\n',
            expected='arr\n"[1,""x"",null]"\n',
        ),
        Scenario(
            name="heterogeneous_records",
            description="Columns are the sorted union of keys across all records.",
            data='{"id":1,"name":"a"}\n{"id":2,"email":"b@example.com"}\n{"id":3,"tags":["x"]}\n',
            expected='email,id,name,tags\n,1,a,\nb@example.com,2,,\n,3,,"[""x""]"\n',
        ),
        Scenario(
            name="first_record_only",
            description="Without a full scan, keys missing from the first record are dropped.",
            data='{"id":1}\n{"id":2,"extra":true}\n',
            scan_all=False,
            expected="id\n1\n2\n",
        ),
        Scenario(
            name="top_level_array",
            description="A top-level array yields one row per element.",
            data='[{"id":1,"ok":true},{"id":2,"ok":false}]',
            expected="id,ok\n1,true\n2,false\n",
        ),
        Scenario(
            name="concatenated_objects",
            description="Objects concatenated without separators.",
            data='{"n":0.5}{"n":1.0}{"n":1e21}',
            expected="n\n0.5\n1\n1000000000000000000000\n",
        ),
        Scenario(
            name="mixed_case_keys",
            description="Column names keep their case when lowercasing is off.",
            data='{"User":{"Name":"Ann","Age":30}}\n',
            lowercase_keys=False,
            expected="User.Age,User.Name\n30,Ann\n",
        ),
        Scenario(
            name="deep_nesting",
            description="Deeply nested structures with an empty object.",
            data='{"a":{"b":{"c":{"d":7}}},"optional":{}}\n',
            expected="a.b.c.d\n7\n",
        ),
    ]
