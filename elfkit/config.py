from dataclasses import dataclass


@dataclass
class PuzzleConfig:
    """tunable constants shared by the puzzle solvers"""
    top_n: int = 3
    group_size: int = 3
    packet_marker_width: int = 4
    message_marker_width: int = 14
    small_directory_limit: int = 100_000
    disk_capacity: int = 70_000_000
    required_free_space: int = 30_000_000
    strict_moves: bool = False  # raise instead of skipping moves from an empty stack

    def __post_init__(self):
        for name in ('top_n', 'group_size', 'packet_marker_width', 'message_marker_width'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.required_free_space > self.disk_capacity:
            raise ValueError("required_free_space cannot exceed disk_capacity")


DEFAULT_CONFIG = PuzzleConfig()
