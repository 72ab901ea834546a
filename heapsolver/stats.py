rounds = 0
promoted_winning = 0
promoted_losing = 0
children_scans = 0
parent_scans = 0


def reset_counters():
    """Reset all run counters"""
    global rounds, promoted_winning, promoted_losing, children_scans, parent_scans
    rounds = 0
    promoted_winning = 0
    promoted_losing = 0
    children_scans = 0
    parent_scans = 0


def print_stats():
    """Print current statistics"""
    print(f"Rounds: {rounds}")
    promoted = promoted_winning + promoted_losing
    print(f"Promoted states: {promoted}")
    if promoted > 0:
        print(f"  Winning: {promoted_winning} ({promoted_winning / promoted * 100:.1f}%)")
        print(f"  Losing: {promoted_losing} ({promoted_losing / promoted * 100:.1f}%)")
    print(f"Adjacency scans: {children_scans} children, {parent_scans} parents")
