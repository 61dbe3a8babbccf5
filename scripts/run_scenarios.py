"""Run scenario definitions and write outputs to out/scenarios."""

from __future__ import annotations

from pathlib import Path

from json2csv.csv_io import RowWriter
from json2csv.converter import convert
from json2csv.decoder import JSONSource
from json2csv.scenarios import get_scenarios


def main() -> None:
    out_dir = Path("out/scenarios")
    out_dir.mkdir(parents=True, exist_ok=True)

    for scenario in get_scenarios():
        scenario_dir = out_dir / scenario.name
        scenario_dir.mkdir(parents=True, exist_ok=True)

        input_path = scenario_dir / "input.json"
        input_path.write_text(scenario.data, encoding="utf-8")

        output_path = scenario_dir / "output.csv"
        with input_path.open("rb") as src, output_path.open("w", newline="", encoding="utf-8") as dst:
            rows = convert(JSONSource(src), RowWriter(dst), scenario.options())

        print(f"{scenario.name}: wrote {rows} row(s) to {output_path}")


if __name__ == "__main__":
    main()
