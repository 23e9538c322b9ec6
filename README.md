# fumo

A compact entity-component-system (ECS) engine and a small gravity platformer
built on it with pygame. The player runs around circular planets, each with its
own gravity field, and a built-in level editor lets you place, drag, resize and
delete planets while the game runs.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Playing

```
fumo
fumo --assets path/to/assets
```

The player's sprite sheets are loaded from `<assets>/The_Dude_Free/`
(`Jump.png`, `Idle.png`, `Land.png`, `Sprint.png`, `Walk.png`); `--assets`
defaults to `assets` in the current directory. A missing sheet stops start-up
with `FileNotFoundError`. The game opens a 1025×1000 window and runs at up to
60 frames per second; close the window or press Escape to quit.

### Player controls

| Key          | Action                                         |
|--------------|------------------------------------------------|
| Space        | jump (only while touching a planet)            |
| Left / Right | run around the planet, playing "sprint"        |
| Up / Down    | move against / along the gravity direction     |

With no key held the "idle" animation plays. The player's velocity is reset at
the end of every frame, so movement only lasts while a key is held.

### Level editor controls

Only one action happens per frame, in this order of precedence:

| Input              | Action                                              |
|--------------------|-----------------------------------------------------|
| Left mouse button  | drag the planet under the cursor                    |
| S                  | spawn a planet in a random colour at the cursor     |
| Shift + D          | delete every planet spawned with S                  |
| Shift + R          | shrink the planet under the cursor (× 0.6666)       |
| D                  | delete a spawned planet under the cursor            |
| R                  | enlarge the planet under the cursor (× 1.5)         |
| 1                  | print the state of the ECS to standard error        |

## Using the engine

- `fumo.scheduler_ecs.SchedulerECS` is the entry point: it creates and destroys
  entities, registers component types, attaches and detaches components,
  creates systems and runs the scheduled ones with `run_systems()`, lowest
  priority first. Only one system can be scheduled per priority.
- `fumo.entity_query.EntityQuery` and `fumo.entity_query.Filter` describe which
  entities a registered system receives in its `sys_entities`
  (`Filter.ALL`, `Filter.ANY`, `Filter.ONLY`, `Filter.NONE` of a component mask).
- `fumo.engine_constants.System` is the base class for systems; override
  `sys_call` with what the system does every frame.
- `fumo.scheduling_systems.SchedulerSystemECS` lets systems put other systems
  to sleep (`sleep_system`) and wake them again (`awake_system`).
- `fumo.containers.NamedComponentContainer` gives names to entities that each
  own one component of a given type.

A minimal example:

```python
from dataclasses import dataclass

from fumo.engine_constants import System
from fumo.entity_query import EntityQuery, Filter
from fumo.scheduler_ecs import SchedulerECS


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


class Printer(System):
    def sys_call(self):
        for entity_id in sorted(self.sys_entities):
            print(entity_id)


ecs = SchedulerECS()
ecs.register_component(Position)
ecs.register_system(
    Printer,
    1,
    EntityQuery(ecs.make_component_mask(Position), Filter.ALL),
)

entity = ecs.create_entity()
ecs.entity_add_component(entity, Position(1.0, 2.0))
ecs.run_systems()  # prints 0
```

Extra positional arguments to `register_system`, `add_unregistered_system` and
their `_unscheduled` variants are passed to the system's constructor.

Misuse, such as registering a component twice, asking for an unregistered
component or system, or creating too many entities (ids run from 0 to 99, with
fewer than 100 alive at once), raises `fumo.engine_constants.EcsError`.

## What it does not do

Levels are not saved or loaded: planets placed with the editor are gone when
the window closes, and the game starts with the player alone. Planets are the
only shapes; there are no rectangular platforms. There is no sound.