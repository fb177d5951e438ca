"""
Rules Module - Action generation and state transitions.
"""

from typing import List

from .action import Action
from .errors import BudgetExhaustedError, IllegalActionError
from .state import State


def legal_actions(state: State) -> List[Action]:
    """
    Find every placement still available in a state.

    Scans the whole board; a cell is eligible only if no drone shares its
    row, column or either diagonal. An empty list means no further drone
    can be placed, which is different from having no drones left.

    Args:
        state: Current state

    Returns:
        Actions in row-major order of their target cells
    """
    return [Action(coord=coord) for coord in state.board.uncovered()]


def apply_action(state: State, action: Action) -> State:
    """
    Place one drone and return the resulting state.

    The input state is left untouched.

    Args:
        state: Current state
        action: Placement returned by legal_actions()

    Returns:
        New State with the drone placed and its lines covered

    Raises:
        BudgetExhaustedError: If the state has no drones left
        IllegalActionError: If the target is off the board or covered
    """
    if state.num_drones_left <= 0:
        raise BudgetExhaustedError(
            f"Cannot place a drone at {action.coord}: no drones left"
        )
    if not state.board.contains(action.x, action.y):
        raise IllegalActionError(f"{action.coord} is outside the board")
    if state.board.is_covered(action.coord):
        raise IllegalActionError(f"{action.coord} is already covered")

    return State(
        board=state.board.place_drone(action.coord),
        history=state.history + (action,),
        num_drones_placed=state.num_drones_placed + 1,
        num_drones_left=state.num_drones_left - 1,
    )
