from typing import Literal

Action = Literal["generate", "configs"]


Args = tuple[str, ...]
