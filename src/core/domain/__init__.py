"""Domain models and rules.

- Pure data structures (Pydantic v2) and the eligibility rule.
- The domain knows nothing about HTTP, the CLI or the Neynar SDK shape.
"""
