from models.cache import CacheEntry
from models.stats import VisitCounter
from models.submission import Submission

MODELS = [CacheEntry, Submission, VisitCounter]
