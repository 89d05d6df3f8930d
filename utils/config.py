import os

# Project Configuration
PROJECT_ID = 'lansim'
DEBUG = os.getenv('DEBUG', 'FALSE') == 'TRUE'

# LOGGING Configuration
LOG_FILENAME = os.getenv('LOG_FILENAME', 'LANSimulation.log')
MAX_LOG_SIZE = 20 * 1024 * 1024  # 20Mb
BACKUP_COUNT = 10

if os.getenv('LOCAL', None) == 'TRUE':
    HOME_DIR = '.'
    LOG_PATH = './log'
else:
    HOME_DIR = os.getenv('LAN_HOME', os.path.expanduser('~/.lansim'))
    LOG_PATH = f'{HOME_DIR}/log'

# Simulation Configuration
LAN_ITERATIONS = int(os.getenv('LAN_ITERATIONS', '1'))
LAN_REPORT_FILE = os.getenv('LAN_REPORT_FILE', None)  # also write the final report here
