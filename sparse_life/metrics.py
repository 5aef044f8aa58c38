"""
Metrics for evaluating Life patterns: period detection and classification.
"""
from collections import defaultdict
from .gol_simulator import simulate


def detect_period(history, translation_invariant=False):
    """Given a history list of boards, return period (1 for still life, >1 if oscillator), or None if no repeat.

    With translation_invariant, boards are compared by shape only, so
    spaceships report the period after which they reappear shifted.
    """
    # detect period relative to final state
    if len(history) <= 1:
        return None
    if translation_invariant:
        history = [b.normalized() for b in history]
    last = history[-1]
    for p in range(1, len(history)):
        if history[-1 - p] == last:
            return p
    return None


def classify(board, max_steps=50):
    """Category of the pattern seeded by `board` after up to max_steps generations."""
    if max_steps < 1:
        raise ValueError(f"max_steps must be >= 1, got {max_steps}")
    hist = simulate(board, steps=max_steps)
    if not hist[-1]:
        return 'died_out'
    per = detect_period(hist)
    if per == 1:
        return 'still_life'
    if per:
        return f'oscillator_p{per}'
    per = detect_period(hist, translation_invariant=True)
    if per:
        return f'spaceship_p{per}'
    return 'survived_unknown'


def summarize(boards, max_steps=50):
    """
    Args:
        boards: iterable of Board seeds.
        max_steps: generations to simulate per seed.
    Returns:
        dict of category counts plus 'total'.
    """
    results = defaultdict(int)
    total = 0
    for b in boards:
        results[classify(b, max_steps=max_steps)] += 1
        total += 1
    results['total'] = total
    return dict(results)
