from pitch_tunnel_matrix.domain.pitch_type import PitchType, lookup_pitch_type


def scouting_note(pitch_a: PitchType | str, pitch_b: PitchType | str, score: int) -> str:
    a = lookup_pitch_type(pitch_a).label
    b = lookup_pitch_type(pitch_b).label

    if score >= 85:
        return (
            f"Elite tunnel. {a} and {b} look identical out of the hand; "
            "hitters cannot tell them apart until it is too late."
        )
    if score >= 70:
        return f"Strong tunnel pairing. {a} into {b} creates late deception that generates swings and misses."
    if score >= 55:
        return (
            f"Decent tunnel. The {a}-{b} pairing overlaps enough to keep hitters off-balance "
            "when sequenced correctly."
        )
    if score >= 40:
        return f"Below-average tunnel. Hitters can pick up the {a}-{b} difference early in flight."
    return f"Poor tunnel. {a} and {b} have very different release signatures; hitters identify the pitch early."
