"""Turn engine components.

- Parsing: `engine/parser.py`
- Hazard roll: `engine/hazard.py`
- Command handlers: `engine/handlers/`
- Session state: `engine/state.py`
- Turn loop: `engine/processor.py`
- Map loading and validation: `engine/world.py`, `engine/validator.py`

Import directly from submodules:
    from amazing_adventure.engine.processor import TurnEngine
    from amazing_adventure.engine.state import SessionStateManager
    from amazing_adventure.engine.world import MapLoader
"""
