"""
Command Dispatch

Maps the action names used on the wire to reactor model commands.
"""

from enum import Enum
from typing import Union

from .exceptions import UnknownActionError
from .reactor import Reactor


class ActionType(Enum):
    """Operator actions accepted by the reactor"""
    POWER_ON = "powerOn"
    POWER_OFF = "powerOff"
    SCRAM = "scram"
    TOGGLE_AUTO = "toggleAuto"
    REFUEL = "refuel"
    SET_FISSION_RATE = "setFissionRate"
    SET_TURBINE_OUTPUT = "setTurbineOutput"
    SET_POWER_LOAD = "setPowerLoad"


def parse_action_type(name: str) -> ActionType:
    """
    Look up an action by its wire name

    Args:
        name: Action name, e.g. "setFissionRate"

    Returns:
        Matching ActionType

    Raises:
        UnknownActionError: If the name is not a known action
    """
    try:
        return ActionType(name)
    except ValueError:
        raise UnknownActionError(name) from None


def apply_action(reactor: Reactor, action: Union[ActionType, str], value: float = 0.0) -> None:
    """
    Apply one operator action to the reactor

    Args:
        reactor: Target reactor
        action: ActionType or its wire name
        value: Setpoint for the set* actions, ignored otherwise

    Raises:
        UnknownActionError: If action is a string that names no action
    """
    if not isinstance(action, ActionType):
        action = parse_action_type(action)

    if action == ActionType.POWER_ON:
        reactor.power_on()
    elif action == ActionType.POWER_OFF:
        reactor.power_off()
    elif action == ActionType.SCRAM:
        reactor.scram()
    elif action == ActionType.TOGGLE_AUTO:
        reactor.toggle_auto()
    elif action == ActionType.REFUEL:
        reactor.refuel()
    elif action == ActionType.SET_FISSION_RATE:
        reactor.set_fission_rate(value)
    elif action == ActionType.SET_TURBINE_OUTPUT:
        reactor.set_turbine_output(value)
    elif action == ActionType.SET_POWER_LOAD:
        reactor.set_power_load(value)
