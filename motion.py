# motion.py

from config import (
    DAMPING_FACTOR,
    GAME_OBJECT_SIZE,
    SPRING_CONSTANT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)


def cob_to_screen(x_cob, y_cob, scale):
    """Maps a center-of-balance reading to the point the player should move towards."""
    target_x = (WINDOW_WIDTH / 2.0) + x_cob * scale * WINDOW_WIDTH
    target_y = (WINDOW_HEIGHT / 2.0) + y_cob * -scale * WINDOW_HEIGHT
    return target_x, target_y


def update_player_position(player, target_x, target_y, dt,
                           spring=SPRING_CONSTANT, damping=DAMPING_FACTOR):
    """
    Advances the player one step along a damped spring pulling it to (target_x, target_y).

    The player is kept inside the field, inset by half its size; hitting a wall
    stops motion on that axis. The new position is appended to the trail.
    """
    force_x = (target_x - player.x) * spring - player.velocity_x * damping
    force_y = (target_y - player.y) * spring - player.velocity_y * damping

    player.velocity_x += force_x * dt
    player.velocity_y += force_y * dt
    player.x += player.velocity_x * dt
    player.y += player.velocity_y * dt

    half = GAME_OBJECT_SIZE / 2
    if player.x < half:
        player.x = half
        player.velocity_x = 0.0
    elif player.x > WINDOW_WIDTH - half:
        player.x = WINDOW_WIDTH - half
        player.velocity_x = 0.0
    if player.y < half:
        player.y = half
        player.velocity_y = 0.0
    elif player.y > WINDOW_HEIGHT - half:
        player.y = WINDOW_HEIGHT - half
        player.velocity_y = 0.0

    player.trail.append(player.x, player.y)
