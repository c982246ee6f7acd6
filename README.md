# instadraw

Building blocks for a small 2D renderer that puts every quad of a frame into a
single instance buffer and draws them with one instanced OpenGL call. The
package holds the CPU-side instance storage, a frame clock, shader and uniform
handling, texture loading, and a window event handler.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `instadraw.buffer`

`InstanceBuffer` stores three float32 attributes for each instance:

- shape, 2 floats: `[kind, a]`, where the kind is 0 for a rectangle, 1 for a
  circle, 2 for an image and 3 for a character;
- destination, 4 floats: `[x, y, w, h]`;
- colour, 4 floats: an RGBA colour, or `[flip_x, flip_y, rotation, 0]` for
  images.

`add_instance(shape, dest, color)` appends one instance and raises `ValueError`
if a part has the wrong number of components. The storage grows by ten
instances at a time. `clear()` resets the count and keeps the capacity.
`len(buffer)` gives the number of instances. `shapes()`, `dests()` and
`colors()` return read-only NumPy views of the stored rows.

### `instadraw.clock`

`Clock(counter=time.perf_counter_ns)` measures time from a nanosecond counter.
After each `update()`, `time` holds the seconds since the clock was created
and `delta_time` the seconds since the previous update. `fps` is
`1 / delta_time` whenever the delta is positive.

### `instadraw.shader`

- `UniformValue` is a typed uniform value whose kind is one of `UniformKind`
  (`INT`, `UINT`, `FLOAT`, `VEC2` to `VEC4`, `IVEC2` to `IVEC4`, `UVEC2` to
  `UVEC4`). Components are checked for count, type and integer range. The
  shortcuts are `UniformValue.int`, `UniformValue.float` and
  `UniformValue.ivec2`.
- `UniformTable` keeps variables in order. `add_var(name, location, value,
  send)` returns the new variable's index. `set_var(index, value)` replaces a
  value and marks it to be sent, and raises `IndexError` for an unknown index.
  `pending()` yields `(location, value)` for each variable marked to be sent.
- `Shader(vertex, fragment)` compiles and links a GL program with pyglet. A
  compile or link failure raises `ShaderError`. `add_var`, `set_var` and
  `update()` register uniforms, change them and send them to the program.
  `delete()` frees the program and may be called more than once. A GL context
  must be current.

### `instadraw.textures`

`decode_rgba(data)` decodes PNG or other image bytes into `(width, height,
pixels)` with tightly packed 8-bit RGBA. Undecodable data raises `ValueError`.
`Textures(sprites_image, font_image)` creates the sprite, block, font, world
and shadow textures, and uploads the sprite and font images with nearest
filtering and a transparent clamp-to-border. `bind()` puts the sprites on
texture unit 0 and the font on unit 1. A GL context must be current.

### `instadraw.events`

`EventHandler(width, height, output=print)` has pyglet-style `on_*` handlers.
Closing the window or pressing Escape sets `running` to `False`. A resize
updates `width` and `height`. Key, text, mouse and focus events are reported
through `output`.

### `instadraw.paths` and `instadraw.constants`

`config_directory()` and `data_directory()` return the per-user directories
for the project. `read(path)` returns a file's text. `asset_path`, `load_text`
and `load_bytes` find and read assets such as `VERTEX_SHADER_PATH`,
`FONT_IMAGE_PATH` and `FONT_DATA_PATH` below a root directory, which is the
working directory by default.

## What is not included

This package provides no window, no drawing calls for rectangles, circles,
images or text, and no glyph lookup for the bitmap font. It has no code that
uploads the instance buffer to the GPU and no demo command. To render a frame,
open a window yourself, for example with pyglet, and wire these pieces
together.