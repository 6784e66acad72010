# blockworld

The core of a voxel world: chunked block storage, value-noise terrain
generation shaped by biome settings, face meshing, view-frustum culling and
swept-box entity physics. Everything is plain Python with no dependencies.
Meshes come out as vertex and index lists for whatever graphics layer you use.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `blockworld.vectors` | `Vector2`, `Vector3` (frozen dataclasses), `dot_product`, `cross_product`, `length`, `normalize` |
| `blockworld.aabb` | `AABB` with `is_colliding`, `set_position`, `set_size`, `vertex_p`, `vertex_n` |
| `blockworld.blocks` | `BlockType`, `TextureData`, predicates `is_drawable`, `is_full`, `is_transparent`, `is_fluid`, `not_ignored_by_ray`, `is_plant`, `is_x_shaped`, and `texture_for` |
| `blockworld.noise` | `NoiseGenerator`: seeded 2D value noise (`generate`, `value` for octave sums, `find_noise2`) |
| `blockworld.rng` | `Random`: a seeded 32-bit Mersenne Twister with `int_in_range` and `set_seed` |
| `blockworld.ray` | `Ray`, stepped along a pitch/yaw direction with `step` |
| `blockworld.position` | `Position`: a local float offset `p` plus a chunk-aligned `chunk_pos` |
| `blockworld.mesh` | `Vertex`, `IndexedTriangleList` with `calculate_normals` |
| `blockworld.primitives` | `cube`, `cube_independent`, `sphere`, `cone`, `plane`, `plane_independent` |
| `blockworld.frustum` | `Frustum` (planes from a 4x4 view-projection matrix), `FrustumPlane`, `FrustumPlaneID` |
| `blockworld.structure` | `ChunkMap` abstract interface, `StructureType`, `make_oak_tree` |
| `blockworld.chunk` | `Chunk` (16×256×16 blocks), `ChunkMeshes`, `chunk_pos_of`, `chunk_to_block_space` |
| `blockworld.biome` | `Biome` settings, loadable from a biome file, and `BiomeType` |
| `blockworld.terrain` | `TerrainGenerator` |
| `blockworld.world` | `World`: the chunk map, with `load_around` and an optional background loader |
| `blockworld.entity` | `Entity` with gravity, water drag and block collisions |
| `blockworld.player` | `Player` and `InputState` for movement and breaking, placing and picking blocks |
| `blockworld.clock` | `Clock` with `restart` and `elapsed` |

## Example

```python
from blockworld.blocks import BlockType
from blockworld.player import InputState, Player
from blockworld.position import Position
from blockworld.vectors import Vector2, Vector3
from blockworld.world import World

with World(seed=1337) as world:
    world.render_distance = 1          # 3x3 chunks around the player
    player = Player(Position(Vector3(0.0, 120.0, 0.0)))
    world.load_around(player.position)

    print(world.get_block(Vector3(0, 0, 0)))   # BlockType.BEDROCK

    player.handle_input(InputState(forward=True), Vector2(0.0, 0.0), world)
    player.update(world, 1 / 60)
```

`World.load_around(position)` unloads chunks further than `unload_distance`
chunks away, generates missing chunks within `render_distance`, marks the
neighbours of newly loaded chunks for remeshing and rebuilds stale meshes.
Both distances default to 8. `World.start_loader(position, interval=0.8)`
repeats this in a background thread until `stop_loader()` is called or the
`with` block ends. Blocks in chunks that are not loaded read as
`BlockType.GRASS`; above and below the world they read as `BlockType.AIR`.

### Biome files

`Biome.load_from_file(path)` reads whitespace-separated `key value` pairs.
The keys are `offset`, `amplitude`, `heightMul`, `xMul`, `yMul`, `zMul`,
`octaves`, `octaveMul1`, `octaveMul2`, `topBlock`, `secondBlock`,
`beachBlock`, `flora <count> <ids...>`, `floraFrequencyNum`,
`trees <count> <ids...>` and `treeFrequencyNum`. Block ids are the integer
values of `BlockType`; tree ids those of `StructureType`. Unknown tokens are
skipped, keys that are left out keep their defaults, and a missing or
malformed value raises `ValueError`. Pass the file as `biome_path` to
`World` or `TerrainGenerator`; without one the default biome has no flora
and no trees.

### Meshing

`Chunk.make_mesh()` returns a `ChunkMeshes` of three triangle lists:
terrain, plants and water, each `None` when empty. A face is emitted only
where the neighbouring block is transparent and of a different type;
crossed plants get two double-sided quads. Layers that produce no faces are
remembered and skipped on later rebuilds until a block change near them
marks them again.

### Input

`Player.handle_input` takes an `InputState` (forward, back, left, right,
sneak, sprint, jump, attack, place, pick) and a mouse delta. Attack, place
and pick act once per press, on the first block within 5 units of a ray from
eye height; placing a full block is refused where it would overlap the
player.

## What it does not do

There is no renderer, window, texture or shader handling, no reading of a
real keyboard or mouse, and no command to run: the package is a library.
Meshes and the `Frustum` are produced for a caller to draw and cull with;
building the view-projection matrix is left to that caller.