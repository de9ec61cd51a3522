"""
Dice Roll Interaction Webhook

A FastAPI application that answers Discord slash-command interactions:
- Ed25519 request verification
- Deferred acknowledgement with out-of-band follow-up delivery
- Dice rolls explained step by step, with synced character sheet stats
- Spell lookup
"""

__version__ = "1.0.0"
