#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#
