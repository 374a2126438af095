"""Basic usage examples for the ASI library."""

import random

from asi import (
    ACTIVITY_PROFILES,
    evaluate,
    generate_series,
    get_profile,
    score,
    trend,
)


def main() -> None:
    # São Paulo, 30 days of simulated history, reproducible via the seed
    series = generate_series(-23.5505, -46.6333, days=30, rng=random.Random(42))

    print("=== Last 5 days ===")
    for s in series[-5:]:
        print(
            f"  {s.timestamp}: {s.temperature:.1f}°C, {s.humidity:.0f}%, "
            f"{s.wind_speed:.0f} km/h, {s.precipitation:.1f} mm"
        )

    hiking = get_profile("hiking")
    current = score(series, hiking)
    print(f"\n=== {hiking.name} ===")
    print(f"  ASI {current.score} ({current.level.value}), trend {trend(series, hiking).value}")

    result = evaluate(series, hiking)
    sub = result.sub_scores
    print(
        f"  sub-scores: temperature {sub.temperature}, humidity {sub.humidity}, "
        f"wind {sub.wind_speed}, precipitation {sub.precipitation}"
    )
    if result.previous_score is not None:
        print(f"  previous-period ASI: {result.previous_score}")

    print("\n=== All activities ===")
    ranked = sorted(ACTIVITY_PROFILES, key=lambda p: score(series, p).score, reverse=True)
    for profile in ranked:
        s = score(series, profile)
        print(f"  {profile.name:<16} {s.score:>3}  {s.level.value}")


if __name__ == "__main__":
    main()
