"""Information theory calculations (entropy, joint entropy, mutual
information and mutual information matrices.)
"""

from . import weights
from . import entropy
from . import mutual_info
