from .sequence import sequence, pair, separated_pair, preceded, terminated, delimited
from .branch import one_of
from .multi import many1, separated_list1
