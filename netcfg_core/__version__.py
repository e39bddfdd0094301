#             _        __
#  _ __   ___| |_ ___ / _| __ _        ___ ___  _ __ ___
# | '_ \ / _ \ __/ __| |_ / _` |_____ / __/ _ \| '__/ _ \
# | | | |  __/ || (__|  _| (_| |_____| (_| (_) | | |  __/
# |_| |_|\___|\__\___|_|  \__, |      \___\___/|_|  \___|
#                         |___/

__title__ = "netcfg_core"
__description__ = "interface model and /etc/network/interfaces generator"
__url__ = "https://github.com/netcfg/netcfg-core"
__author__ = "netcfg-core developers"
__author_email__ = "dev@netcfg.invalid"
__version__ = "1.0.0"
__status__ = "beta"
__license__ = "BSD-3-Clause"
__license_url__ = "https://opensource.org/licenses/BSD-3-Clause"
