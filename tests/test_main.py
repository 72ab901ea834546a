from __future__ import annotations

import io
import json
import shutil
import unittest
import uuid
from contextlib import contextmanager, redirect_stdout
from unittest import mock

from tests import test_support

from heapsolver import main as cli
from heapsolver.common import Conclusion


TMP_BASE = test_support.ROOT / "tests" / "_tmp"


@contextmanager
def local_tmp_dir():
    tmp = TMP_BASE / f"tmp_{uuid.uuid4().hex}"
    tmp.mkdir(parents=True, exist_ok=False)
    try:
        yield tmp
    finally:
        shutil.rmtree(tmp, ignore_errors=True)


def run_main(*args: str) -> tuple[int, list[str]]:
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = cli.main(list(args))
    return code, buf.getvalue().splitlines()


class TestMainCli(unittest.TestCase):
    def test_default_dump(self) -> None:
        code, lines = run_main()
        self.assertEqual(code, 0)
        table = [line for line in lines if line]
        self.assertEqual(len(table), 384)
        self.assertEqual(table[0], "State(0, 0, 0, 0): Losing (parity 0)")
        self.assertEqual(table[1], "State(0, 0, 0, 1): Winning (parity 1)")
        self.assertEqual(table[-1], "State(1, 3, 5, 7): Winning (parity 0)")
        self.assertFalse(any("Unknown" in line for line in table))

    def test_dump_in_lexicographic_order(self) -> None:
        _code, lines = run_main()
        heaps = [
            tuple(int(h) for h in line[len("State("):line.index(")")].split(", "))
            for line in lines
            if line
        ]
        self.assertEqual(heaps, sorted(heaps))

    def test_check_passes(self) -> None:
        code, lines = run_main("--check")
        self.assertEqual(code, 0)
        self.assertIn("Theory mismatches: 0", lines)

    def test_check_fails_on_mismatch(self) -> None:
        fake = [(test_support.state(0, 0, 0, 1), Conclusion.LOSING, Conclusion.WINNING)]
        with mock.patch.object(cli, "find_mismatches", return_value=fake):
            code, lines = run_main("--check")
        self.assertEqual(code, 1)
        self.assertIn("Theory mismatches: 1", lines)

    def test_stats(self) -> None:
        code, lines = run_main("--stats")
        self.assertEqual(code, 0)
        self.assertTrue(any(line.startswith("Solved 384 states in") for line in lines))
        self.assertIn("Promoted states: 383", lines)

    def test_trace_prints_each_round(self) -> None:
        code, lines = run_main("--trace")
        self.assertEqual(code, 0)
        headers = [line for line in lines if line.startswith("Round ")]
        self.assertGreaterEqual(len(headers), 1)
        self.assertTrue(headers[0].startswith("Round 1 ("))
        self.assertIn("Unknown=0", headers[-1])
        # One table per round plus the final dump.
        table_lines = [line for line in lines if line.startswith("State(")]
        self.assertEqual(len(table_lines), 384 * (len(headers) + 1))

    def test_json_out(self) -> None:
        with local_tmp_dir() as tmp:
            path = tmp / "nested" / "table.json"
            code, lines = run_main("--out", str(path))
            self.assertEqual(code, 0)
            self.assertIn(f"Wrote JSON: {path}", lines)
            data = json.loads(path.read_text(encoding="utf-8"))

        self.assertEqual(data["bounds"], [1, 3, 5, 7])
        self.assertGreaterEqual(data["rounds"], 1)
        self.assertEqual(len(data["states"]), 384)
        self.assertEqual(data["counts"]["Unknown"], 0)
        self.assertEqual(data["counts"]["Winning"] + data["counts"]["Losing"], 384)
        self.assertEqual(data["states"][0], {"heaps": [0, 0, 0, 0], "conclusion": "Losing", "parity": 0})
        self.assertEqual(data["states"][1], {"heaps": [0, 0, 0, 1], "conclusion": "Winning", "parity": 1})


if __name__ == "__main__":
    unittest.main()
