from .member import Member
from .sequence_counter import SequenceCounter
