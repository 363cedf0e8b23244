from .array import *
from .timeseries import *
from .frequencyseries import *
from .optparse import *
