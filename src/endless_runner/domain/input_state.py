from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    jump_pressed: bool = False     # true only on the frame the key is pressed
    restart_pressed: bool = False


NO_INPUT = InputState()
