"""SCP-294 drink dispenser — FastAPI relay backend.

Accepts a short drink request from the game client, screens it, asks a
Mistral model for a structured drink description and returns a
sanitised cosmetic-effect descriptor. The client never talks to the
model provider directly.
"""
