# fivednine

A game selection carousel. It shows one card for each game in a games
database, in a row, with the game's cover art on each card. You move between
the cards with the keyboard. The selected card is drawn at full brightness,
the others are dimmed, and the camera moves towards the selected card.

The carousel opens a 1024x768 window with an OpenGL 3.2 core context.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
fivednine --config path/to/config.json
```

The `--config` argument is required. If it is missing, or the configuration,
assets or games database cannot be loaded, an error is logged to standard
error and the command exits with a non-zero status.

The configuration file is a JSON object with three required string keys:

```json
{
    "textures_path": "assets/textures",
    "shaders_path": "assets/shaders",
    "gamesdb_path": "assets/games.json"
}
```

- `textures_path` is a directory of `.png` images. Each image is stored as a
  texture named after its file name without the extension. Images that fail
  to load are skipped with a warning.
- `shaders_path` is a directory of `.glsl` files named
  `<program>_vert.glsl` and `<program>_frag.glsl`. Each pair becomes one
  shader program called `<program>`. If any program fails to build, start-up
  fails. The cards are drawn with the program called `gamecard`. It takes
  vertex positions (vec3) at attribute location 0 and texture coordinates
  (vec2) at location 1. It must have the `model`, `view`, `projection` and
  `sampler` uniforms. The cards also set a float uniform called `tint`.
- `gamesdb_path` is a JSON file with a `games` array. Each entry needs a
  `title`, an `alias` and a `texture_prefix`. Entries that lack a field are
  skipped, and start-up fails only if no entry could be used.

A card uses the texture named `<texture_prefix>_600x900`. For example:

```json
{
    "games": [
        {"title": "Example Game", "alias": "example", "texture_prefix": "example"}
    ]
}
```

This game needs an image called `example_600x900.png` in the textures
directory.

The carousel holds at most 255 games. Entries after that are ignored, and a
warning is logged.

## Controls

| Key       | Action        |
|-----------|---------------|
| Left / A  | Previous game |
| Right / D | Next game     |
| Q         | Quit          |

Closing the window also quits.

## What it does not do

Selecting a game does not start it. No key confirms a selection.
`FivedNineApp.confirm_current_selection()` only returns the `GameInfo` of the
selected card. Launching the game is up to whatever uses the package.

## Using the pieces

The building blocks can also be used on their own:

- `fivednine.cli.CommandLineArgumentParser` reads `--name value` pairs from a
  list of arguments that does not include the program name.
  `find_argument(name)` returns the matching argument, or `None`.
- `fivednine.config.AppConfig.from_file` loads and checks a configuration
  file. It raises `ConfigError` when there is a problem.
- `fivednine.events.EventPump` is a first-in, first-out queue of
  `SelectorEvent`s.
- `fivednine.render.camera` provides `Camera`, `look_at` and `ortho`. The
  matrices are numpy arrays.
- `fivednine.render.texture.TextureStorage` and
  `fivednine.render.shader.ShaderStorage` keep textures and shader programs
  by unique name. They take an uploader or compiler object, so they can be
  used without an OpenGL context.
- `fivednine.log` handles logging that can be filtered by verbosity
  (`set_log_verbosity`) and by zone (`enable_zone`, `disable_zone`). Output
  goes to standard error unless `set_log_file` is called.
- `fivednine.timing` provides `ticks_ms` and `sleep_ms`.