import argparse
import logging
import sys
from random import Random

import pygame

from chip8_cpu import CPU
from chip8_exception import Chip8Exception, RomReadException
from chip8_instruction import decode_instruction
from chip8_keyboard import translate_key
from chip8_screen import Screen

logger = logging.getLogger(__name__)

# A simple timer event used for the delay and sound timers
TIMER = pygame.USEREVENT + 1
# Timer decrement interval (in ms), roughly 60 Hz
DELAY_INTERVAL = 17


def read_rom_file(path):
    """
    Read the raw bytes of a ROM file.

    :param path: the path of the ROM to read
    :return: the contents of the file
    """
    try:
        with open(path, 'rb') as rom_file:
            return rom_file.read()
    except OSError as error:
        raise RomReadException(path, error.strerror or error)


def trace_instruction(project_cpu):
    """
    Log the instruction about to run at the program counter.
    """
    pc = project_cpu.cpu_registers['pc']
    if project_cpu.cpu_awaiting_key():
        logger.debug("%04X  ----  waiting for key", pc)
        return
    try:
        instruction = decode_instruction(project_cpu.cpu_memory.read_word(pc))
    except Chip8Exception:
        return
    logger.debug("%04X  %04X  %s", pc, instruction.word, instruction.mnemonic())


def handle_events(project_cpu):
    """
    Drain the pygame event queue, feeding key events to the CPU.

    :param project_cpu: the CPU receiving key state
    :return: False when the user asked to quit
    """
    for event in pygame.event.get():
        if event.type == TIMER:
            project_cpu.cpu_decrement_timers()
        elif event.type == pygame.QUIT:
            return False
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            if event.type == pygame.KEYDOWN and event.key == pygame.K_q:
                return False
            chip8_key = translate_key(event.key)
            if chip8_key is not None:
                project_cpu.cpu_set_key(chip8_key, event.type == pygame.KEYDOWN)
    return True


def screen_cpu_connector(args):
    """
    Runs the main emulator loop with the specified arguments.

    :param args: the parsed command-line arguments
    :return: the process exit status
    """
    try:
        rom_data = read_rom_file(args.rom)
        project_cpu = CPU(
            rng=Random(args.seed),
            decrement_timers_per_cycle=not args.realtime_timers)
        project_cpu.cpu_load_rom(rom_data)
    except Chip8Exception as error:
        logger.error("%s", error)
        return 1
    logger.info("Loaded %s (%d bytes)", args.rom, len(rom_data))

    pygame.init()
    project_screen = Screen(ratio=args.scale)
    project_screen.init_display()
    if args.realtime_timers:
        pygame.time.set_timer(TIMER, DELAY_INTERVAL)

    status = 0
    running = True
    while running:
        pygame.time.wait(args.op_delay)
        if args.verbose:
            trace_instruction(project_cpu)
        try:
            project_cpu.cpu_execute_cycle()
        except Chip8Exception as error:
            logger.error("Halting: %s", error)
            logger.debug("Machine state:\n%s", project_cpu)
            status = 1
            break

        if project_cpu.cpu_framebuffer.take_changed_flag():
            project_screen.render(project_cpu.cpu_framebuffer)

        running = handle_events(project_cpu)

    project_screen.close_display()
    pygame.quit()
    return status


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Starts a simple Chip 8 emulator")
    parser.add_argument(
        "rom", help="the ROM file to load on startup")
    parser.add_argument(
        "-s", help="the scale factor to apply to the display "
                   "(default is 10)", type=int, default=10, dest="scale")
    parser.add_argument(
        "-d", help="sets the CPU operation to take at least "
                   "the specified number of milliseconds to execute (default is 1)",
        type=int, default=1, dest="op_delay")
    parser.add_argument(
        "-v", "--verbose", help="log a trace of every instruction executed",
        action="store_true")
    parser.add_argument(
        "--seed", help="seed for the random number generator used by RAND",
        type=int, default=None)
    parser.add_argument(
        "--realtime-timers", help="decrement the timers at 60 Hz instead of "
                                  "once per CPU cycle",
        action="store_true", dest="realtime_timers")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s]:  %(message)s", stream=sys.stdout)
    return screen_cpu_connector(args)


if __name__ == "__main__":
    sys.exit(main())
