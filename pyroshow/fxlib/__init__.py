#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
"""Built-in firework effects for pyroshow."""

# Incremental effects
from .burst import Burst as Burst
from .fountain import Fountain as Fountain
from .spiral import Spiral as Spiral
from .willow import Willow as Willow

# Closed-form effects
from .chrysanthemum import Chrysanthemum as Chrysanthemum
from .crossette import Crossette as Crossette
from .palm_tree import PalmTree as PalmTree
from .ring import Ring as Ring
from .strobe import Strobe as Strobe

# Professional shells
from .shells import ChrysanthemumShell as ChrysanthemumShell
from .shells import CrossetteShell as CrossetteShell
from .shells import KamuroShell as KamuroShell
from .shells import PalmShell as PalmShell
from .shells import PeonyShell as PeonyShell
from .shells import WillowShell as WillowShell
