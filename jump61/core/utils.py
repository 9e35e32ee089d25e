def format_info(depth, score, nodes, elapsed, move, win_threshold):
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    if abs(score) >= win_threshold:
        score_str = "win red" if score > 0 else "win blue"
    else:
        score_str = f"material {score}"
    move_str = f"{move[0]} {move[1]}" if move else "-"
    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} move {move_str}"
