from .frequency import MotifFrequency, count_motif, find_frequent_motifs

__all__ = [
    "MotifFrequency",
    "count_motif",
    "find_frequent_motifs",
]
