WIDTH = 64
HEIGHT = 32

MEMORY_SIZE = 0x1000
MEMORY_START_FONT = 0x000
MEMORY_START_ROM = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - MEMORY_START_ROM  # 3584 bytes

NUM_REGISTERS = 16
REGISTER_FLAG = 0xF
STACK_DEPTH = 16
NUM_KEYS = 16

FONT_SPRITE_SIZE = 5
TIMER_HZ = 60
DEFAULT_CPU_HZ = 500
