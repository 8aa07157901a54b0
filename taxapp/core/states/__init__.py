from taxapp.core.states.calc import calculate_state_tax
from taxapp.core.states.info import StateTaxInfo
from taxapp.core.states.registry import UnknownStateError, get_state_info, list_supported_states

__all__ = [
    "StateTaxInfo",
    "UnknownStateError",
    "calculate_state_tax",
    "get_state_info",
    "list_supported_states",
]
