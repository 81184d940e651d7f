# pypong

Pong for two players at one keyboard. It runs full screen at the desktop's
resolution.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
pypong
```

The game starts on a menu:

- **Space** starts a match.
- **Esc**, or closing the window, quits. This works in the menu and during a match.

Controls during a match:

| Player            | Up  | Down |
|-------------------|-----|------|
| One (left side)   | W   | S    |
| Two (right side)  | Up  | Down |

Scoring and speed:

- When the ball goes past the left or right edge, the player on the other side scores a point. The ball then goes back to the centre.
- The first player to reach 5 points wins.
- The winner's message is shown for three seconds, and then the game returns to the menu.
- Each paddle hit makes the ball faster horizontally, up to a fixed limit.
- Where the ball meets the paddle changes its vertical speed. That speed is capped too.
- The game runs at 60 frames per second.

## Assets

The game looks for these files, with paths relative to the working directory:

- **Net texture.** `../assets/images/blackandwhite.jpg`, then `./assets/images/blackandwhite.jpg`.
- **Text font.** `../assets/fonts/font.ttf`.
- **Sound effects.** `../assets/sounds/paddle_bounce.wav`, `../assets/sounds/wall_bounce.wav` and `../assets/sounds/score.wav`.

The game still runs if any of them is missing:

- If no net image loads, the net is drawn in plain grey.
- If the font cannot be loaded, pygame's default font is used.
- If a sound cannot be loaded, the game prints a message such as `Failed to load wall sound!` on standard error. That sound then stays silent. This also happens when no audio device is available.

## Using it as a library

### `pypong.settings.Settings(width, height)`

A frozen dataclass that gives each size and speed as a share of the window size:

- `font_size()`
- `ball_radius()`
- `ball_speed_x()`
- `ball_speed_y()`
- `net_size()`
- `paddle_speed()`
- `paddle_width()`
- `paddle_height()`

### `pypong.sound.SoundBank`

- `load(directory)` reads the three effects from a directory. It returns the names of the effects that failed to load.
- `loaded` lists the effects that loaded.
- `paddle()`, `wall()` and `score()` each play one effect. Each returns whether anything was played.

### `pypong.paddle.Paddle(settings, is_right)`

A paddle whose `x`, `y` position is its centre. It keeps its score in `points`.

- `check_movement(up, down)` moves the paddle.
- `check_collision()` keeps it inside the window.
- `bounds()` returns `(left, top, width, height)`.
- `draw(surface)` draws it.

### `pypong.ball.Ball(settings, sound=None, rng=None)`

A ball whose `x`, `y` position is the top-left corner of its bounding box. It also has `vx`, `vy` and `velocity`.

- `move()` advances the ball by its velocity.
- `reset(is_right)` puts the ball back in the centre, heading right or left.
- `check_collisions()` bounces the ball off the top and bottom edges. It returns a `Score(points, is_right)`.
- `check_object_collisions(paddle)` bounces the ball off a paddle. It returns whether the ball hit it.
- `bounds()` returns the bounding box.
- `draw(surface)` draws the ball.

### `pypong.game`

`Game(surface, *, sound=None, rng=None, sleep=time.sleep)` plays a match on any pygame surface.

- `state` holds a `State`: `MENU`, `PLAYING` or `EXIT`.
- `handle_event(event)` applies a pygame event.
- `update(pressed)` advances one frame. `pressed` is a key-state sequence indexed by key code. The method returns the frame's `Score`.
- `winner()` returns the victory message, or `None` if nobody has won yet.
- `check_win()` shows the victory message, pauses, and returns to the menu.
- `draw_menu()` draws the title screen, and `render()` draws the match.
- `run()` runs the loop until the player quits.

The window functions:

- `create_window(title)` opens the full-screen window.
- `main(argv=None)` opens the window and runs a game. It is the entry point behind the `pypong` command.

## What it does not do

There is no computer opponent; both paddles are played from the keyboard. The window is always full screen, and the winning score is fixed at 5.