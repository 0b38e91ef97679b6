LOOK_AHEAD = 6


def policy(env):
    # Strategy: Watch the rows above the car. If a car in our lane will reach us within
    # LOOK_AHEAD ticks, move to the neighbouring lane whose nearest car is farthest away.
    # Cars level with us are already past, so only rows above count. At most one car spawns
    # per tick, so no two cars share a row and a neighbour is always clear when ours is 1 away.
    snap = env.state.snapshot()
    lane, row = snap.player_lane, snap.player_row

    def nearest_gap(l):
        gaps = [row - r for ol, r in snap.obstacles if ol == l and r < row]
        return min(gaps) if gaps else snap.rows

    own_gap = nearest_gap(lane)
    if own_gap > LOOK_AHEAD:
        return [0, 0, 0]  # Lane is clear

    options = []
    if lane > 0:
        options.append((nearest_gap(lane - 1), 3))  # Move left
    if lane < snap.lanes - 1:
        options.append((nearest_gap(lane + 1), 4))  # Move right
    if not options:
        return [0, 0, 0]

    gap, movement = max(options)
    if gap <= own_gap:
        return [0, 0, 0]
    return [movement, 0, 0]
