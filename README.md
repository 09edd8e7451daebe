# antworld

A small turn-based ant colony simulation on a grid.

`RandomMapFactory` builds a world of 201 rows by 211 columns (both can be
changed). Each tile independently gets a rock (about 30 %), food (about
2 %) or empty ground. A queen is placed on the centre tile, which thereby
becomes discovered.

On each turn `Simulator.turn` collects the actions of every ant on the map,
executes them in order, then ticks the clock so that every ant ages:

- The queen lays one new ant on her own tile on every turn except each
  twelfth. While she is still age 0 she lays a scout; afterwards roughly
  80 % workers, 15 % scouts and 5 % soldiers.
- Scouts stay minor until they are two ticks old, then step each turn to a
  random neighbouring tile that still has room for an ant (rocks hold none,
  food and empty ground hold twelve). Scouts may enter undiscovered tiles;
  every tile an ant reaches becomes discovered.
- Workers and soldiers age and lose one energy point each tick, but they do
  not leave the minor stage, so they stay on the tile where they were laid.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Running

```
antworld
```

This starts an HTTP server on all interfaces, port 8080 (change it with
`--port`). `GET /` returns the world as JSON; any other path gets a 404.

```json
{"tiles": [[{"type": 2}, {"type": 0}, ...], ...]}
```

`tiles` holds one list per row, and each tile's `type` is `0` for a rock,
`1` for the colony and `2` for anything else. The response carries
`Access-Control-Allow-Origin: *`, so a page on another origin can fetch it.

```
antworld --text --turns 100
```

runs in the terminal instead: it prints the map, the ant count, the ant
count after each of the given number of turns (100 by default), and the
map again.

## Using the library

```python
from antworld.simulator import Simulator
from antworld.mapgen import RandomMapFactory
from antworld.app import render_map, ant_count_line

sim = Simulator()
sim.init_simulation(RandomMapFactory())
for _ in range(100):
    sim.turn()

print(ant_count_line(sim))
print(render_map(sim))
```

In the text map `*` is an undiscovered tile, `A` a tile with at least one
ant, `#` a rock, `F` food and `C` the colony; empty ground is a space.

`antworld.app.mode_txt` runs the text session in one call, and
`antworld.presenter.AntApiPresenter.instance().expose()` gives the JSON
document that the server sends. `antworld.app.make_server` returns the
HTTP server without starting it.

## Limits

- The server builds its world once and never advances it: every `GET /`
  returns the freshly generated map.
- Ants do not gather food, fight, or lay pheromones; pheromones exist in
  the model but nothing creates them.
- The random map factory never places a colony tile, so type `1` and `C`
  do not appear in generated maps.

## Tests

```
pip install .[test]
pytest
```