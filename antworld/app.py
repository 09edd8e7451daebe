"""Command-line entry point: text rendering or the JSON HTTP API."""

from __future__ import annotations

import argparse
import json
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TextIO
from urllib.parse import urlsplit

from antworld.clock import Clock
from antworld.mapgen import RandomMapFactory
from antworld.presenter import AntApiPresenter
from antworld.simulator import Simulator
from antworld.world import ObjectType

_OBJECT_GLYPHS: dict[ObjectType, str] = {
    ObjectType.VOID: " ",
    ObjectType.ROCK: "#",
    ObjectType.COLONY: "C",
    ObjectType.FOOD: "F",
}


def _require_map(simulator: Simulator):
    if simulator.world_map is None:
        raise RuntimeError("simulation has not been initialised")
    return simulator.world_map


def ant_count_line(simulator: Simulator) -> str:
    """The line reporting how many ants are on the map."""
    return f"Nombre De Fourmi :{len(_require_map(simulator).ants())}"


def render_map(simulator: Simulator) -> str:
    """Text picture of the map, one line per row.

    '*' marks undiscovered tiles, 'A' tiles holding ants; otherwise the
    tile's object is drawn.
    """
    world = _require_map(simulator)
    lines = []
    for x in range(world.height):
        chars = []
        for y in range(world.width):
            tile = world.tile(x, y)
            if not tile.discovered:
                chars.append("*")
            elif tile.ants:
                chars.append("A")
            else:
                chars.append(_OBJECT_GLYPHS.get(tile.object.object_type, " "))
        lines.append("".join(chars) + "\n")
    return "".join(lines)


def mode_txt(turns: int = 100, out: TextIO | None = None) -> None:
    """Run a random simulation, printing the map and ant count each turn."""
    out = sys.stdout if out is None else out
    clock = Clock()
    simulator = Simulator(clock=clock)
    simulator.init_simulation(RandomMapFactory(clock=clock))
    out.write(render_map(simulator))
    print(ant_count_line(simulator), file=out)
    for _ in range(turns):
        simulator.turn()
        print(ant_count_line(simulator), file=out)
    out.write(render_map(simulator))


class _ApiHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        if urlsplit(self.path).path != "/":
            self.send_error(404)
            return
        body = json.dumps(AntApiPresenter.instance().expose()).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        pass


def make_server(host: str = "0.0.0.0", port: int = 8080) -> ThreadingHTTPServer:
    """An HTTP server answering GET / with the map as JSON."""
    return ThreadingHTTPServer((host, port), _ApiHandler)


def mode_api(port: int = 8080) -> None:
    """Serve the JSON API until interrupted."""
    with make_server("0.0.0.0", port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="antworld", description="Ant colony simulation.")
    parser.add_argument("--text", action="store_true", help="run in the terminal instead of serving")
    parser.add_argument("--turns", type=int, default=100, help="turns to run in text mode")
    parser.add_argument("--port", type=int, default=8080, help="port for the HTTP API")
    args = parser.parse_args(argv)
    if args.text:
        mode_txt(args.turns)
    else:
        mode_api(args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())