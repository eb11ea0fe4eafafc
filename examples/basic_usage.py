"""
ssss — Basic Usage Example

Splits a secret into 5 shares, any 3 of which bring it back.
Two shares are not enough: they produce bytes of the right length that
look nothing like the secret, and nothing signals the failure.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ssss import SsssConfig, SsssError, configure_logging, generate_shares, reconstruct_with_report


def main():
    configure_logging("warning")

    secret = b"correct horse battery staple"
    config = SsssConfig(num_shares=5, threshold=3)

    print("=" * 50)
    print("  ssss: Shamir's Secret Sharing over GF(2^8)")
    print("=" * 50)

    tokens = generate_shares(config, secret)
    print(f"\nGenerated {len(tokens)} shares (threshold {config.threshold}):")
    for i, token in enumerate(tokens, start=1):
        print(f"  Share {i}: {token}")

    # Any 3 of the 5 shares are enough
    result = reconstruct_with_report([tokens[0], tokens[2], tokens[4]])
    print(f"\nFrom shares 1, 3, 5: {result.secret!r}")
    print(f"  Matches original: {result.secret == secret}")

    # Two shares give a wrong answer of the same length
    result = reconstruct_with_report(tokens[:2])
    print(f"\nFrom shares 1, 2:    {result.secret!r}")
    print(f"  Matches original: {result.secret == secret}")

    # Malformed tokens are skipped and reported
    result = reconstruct_with_report(["not-a-valid-token"] + tokens[1:4])
    print(f"\nWith one bad token:  {result.secret!r}")
    for rejected in result.rejected:
        print(f"  Skipped token {rejected.position}: {rejected.error}")

    # Invalid configurations are rejected before any work is done
    try:
        generate_shares(SsssConfig(num_shares=2, threshold=3), secret)
    except SsssError as e:
        print(f"\nRejected config: {e}")


if __name__ == "__main__":
    main()
