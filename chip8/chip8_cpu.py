from random import Random

from chip8_addresses import (
    PROGRAM_COUNTER_START, FONT_START, FONT_GLYPH_SIZE, INDEX_LIMIT, BYTE_MASK
)
from chip8_exception import Chip8Exception, UnknownOpCodeException
from chip8_framebuffer import FrameBuffer
from chip8_instruction import decode_instruction
from chip8_keypad import Keypad
from chip8_memory import Memory
from chip8_stack import CallStack

# The total number of registers in the Chip 8 CPU
NUM_REGISTERS = 0x10

# VF doubles as the carry, borrow and collision flag
FLAG_REGISTER = 0xF

# The outcomes of a single cycle
CYCLE_CONTINUED = 'continued'
CYCLE_AWAITING_KEY = 'awaiting_key'

# C L A S S E S ###############################################################


class CPU(object):
    """
    A class to emulate a Chip 8 CPU. There are several good resources out on
    the web that describe the internals of the Chip 8 CPU. For example:

        http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
        http://michael.toren.net/mirrors/chip8/chip8def.htm

    To summarize these sources, the Chip 8 has:

        * 16 x 8-bit general purpose registers (V0 - VF**)
        * 1 x 16-bit index register (I)
        * 1 x 16-bit program counter (PC)
        * 1 x 16 level return address stack
        * 1 x 8-bit delay timer (DT)
        * 1 x 8-bit sound timer (ST)

    ** VF is a special register - it is used to store the carry, borrow and
    collision flags, but instructions may also address it like any other
    register.

    The CPU owns all of the machine state: memory, stack, keypad and frame
    buffer. Nothing here blocks or does any I/O; the driver calls
    cpu_execute_cycle() as often as it wants instructions to run.
    """
    def __init__(self, rng=None, decrement_timers_per_cycle=True):
        """
        Initialize the Chip8 CPU.

        :param rng: a random.Random compatible generator used by Ctnn. Pass
            a seeded generator to get repeatable runs.
        :param decrement_timers_per_cycle: when False, the timers are left
            for the caller to tick through cpu_decrement_timers()
        """
        # There are two timer registers, one for sound and one that is general
        # purpose known as the delay timer. The timers are loaded with a value
        # and then decremented until they reach zero.
        self.cpu_timers = {
            'delay': 0,
            'sound': 0,
        }

        # Defines the general purpose, index and program counter registers.
        self.cpu_registers = {
            'v': [],
            'index': 0,
            'pc': 0,
        }

        # The operation_lookup table is executed according to the most
        # significant nibble of the operand (e.g. operand 8nnn would call
        # self.cpu_execute_logical_instruction)
        self.cpu_operation_lookup = {
            0x0: self.cpu_system_routines,               # see subfunctions below
            0x1: self.cpu_jump_to_address,               # 1nnn - JUMP nnn
            0x2: self.cpu_jump_to_subroutine,            # 2nnn - CALL nnn
            0x3: self.cpu_skip_if_reg_equal_val,         # 3snn - SKE  Vs, nn
            0x4: self.cpu_skip_if_reg_not_equal_val,     # 4snn - SKNE Vs, nn
            0x5: self.cpu_skip_if_reg_equal_reg,         # 5st0 - SKE  Vs, Vt
            0x6: self.cpu_move_value_to_reg,             # 6snn - LOAD Vs, nn
            0x7: self.cpu_add_value_to_reg,              # 7snn - ADD  Vs, nn
            0x8: self.cpu_execute_logical_instruction,   # see subfunctions below
            0x9: self.cpu_skip_if_reg_not_equal_reg,     # 9st0 - SKNE Vs, Vt
            0xA: self.cpu_load_index_reg_with_value,     # Annn - LOAD I, nnn
            0xB: self.cpu_jump_to_v0_plus_value,         # Bnnn - JUMP [V0] + nnn
            0xC: self.cpu_generate_random_number,        # Ctnn - RAND Vt, nn
            0xD: self.cpu_draw_sprite,                   # Dstn - DRAW Vs, Vt, n
            0xE: self.cpu_keyboard_routines,             # see subfunctions below
            0xF: self.cpu_misc_routines,                 # see subfunctions below
        }

        # Opcodes starting with 0 are matched on the whole operand
        self.cpu_system_routine_lookup = {
            0x00E0: self.cpu_clear_screen,               # 00E0 - CLS
            0x00EE: self.cpu_return_from_subroutine,     # 00EE - RET
        }

        # This set of operations is invoked when the operand loaded into the
        # CPU starts with 8 (e.g. operand 8nn0 would call
        # self.cpu_move_reg_into_reg)
        self.cpu_logical_operation_lookup = {
            0x0: self.cpu_move_reg_into_reg,             # 8st0 - LOAD Vs, Vt
            0x1: self.cpu_logical_or,                    # 8st1 - OR   Vs, Vt
            0x2: self.cpu_logical_and,                   # 8st2 - AND  Vs, Vt
            0x3: self.cpu_exclusive_or,                  # 8st3 - XOR  Vs, Vt
            0x4: self.cpu_add_reg_to_reg,                # 8st4 - ADD  Vs, Vt
            0x5: self.cpu_subtract_reg_from_reg,         # 8st5 - SUB  Vs, Vt
            0x6: self.cpu_right_shift_reg,               # 8st6 - SHR  Vs
            0x7: self.cpu_subtract_reg_from_reg1,        # 8st7 - SUBN Vs, Vt
            0xE: self.cpu_left_shift_reg,                # 8stE - SHL  Vs
        }

        # Opcodes starting with E are matched on the low byte
        self.cpu_keyboard_routine_lookup = {
            0x9E: self.cpu_skip_if_key_pressed,          # Es9E - SKPR Vs
            0xA1: self.cpu_skip_if_key_not_pressed,      # EsA1 - SKUP Vs
        }

        # This set of operations is invoked when the operand loaded into the
        # CPU starts with F (e.g. operand Fn07 would call
        # self.cpu_move_delay_timer_into_reg)
        self.cpu_misc_routine_lookup = {
            0x07: self.cpu_move_delay_timer_into_reg,    # Ft07 - LOAD Vt, DELAY
            0x0A: self.cpu_wait_for_keypress,            # Ft0A - KEYD Vt
            0x15: self.cpu_move_reg_into_delay_timer,    # Fs15 - LOAD DELAY, Vs
            0x18: self.cpu_move_reg_into_sound_timer,    # Fs18 - LOAD SOUND, Vs
            0x1E: self.cpu_add_reg_into_index,           # Fs1E - ADD  I, Vs
            0x29: self.cpu_load_index_with_reg_sprite,   # Fs29 - LOAD I, Vs
            0x33: self.cpu_store_bcd_in_memory,          # Fs33 - BCD
            0x55: self.cpu_store_regs_in_memory,         # Fs55 - STOR [I], Vs
            0x65: self.cpu_read_regs_from_memory,        # Fs65 - LOAD Vs, [I]
        }
        self.cpu_instruction = decode_instruction(0)
        self.cpu_random = rng if rng is not None else Random()
        self.cpu_decrement_per_cycle = decrement_timers_per_cycle
        self.cpu_memory = Memory()
        self.cpu_stack = CallStack()
        self.cpu_keypad = Keypad()
        self.cpu_framebuffer = FrameBuffer()
        self.cpu_waiting_register = None
        self.cpu_reset()

    def __str__(self):
        val = 'PC: {:4X}  OP: {:4X}\n'.format(
            self.cpu_registers['pc'], self.cpu_instruction.word)
        for index in range(NUM_REGISTERS):
            val += 'V{:X}: {:2X}\n'.format(index, self.cpu_registers['v'][index])
        val += 'I: {:4X}\n'.format(self.cpu_registers['index'])
        val += 'SP: {:X}\n'.format(self.cpu_stack.depth)
        val += 'DT: {:2X}  ST: {:2X}\n'.format(
            self.cpu_timers['delay'], self.cpu_timers['sound'])
        return val

    def cpu_execute_cycle(self):
        """
        Run one fetch, decode, execute and timer tick step.

        The instruction at the program counter is fetched and the program
        counter advanced past it before the instruction runs, so jumps, calls
        and skips simply overwrite it. If the instruction raises, the program
        counter is put back on the faulting instruction, the timers are not
        ticked, and the exception is passed on to the caller.

        While a Ft0A key wait is pending no instruction is fetched; the
        cycle only checks the keypad.

        :return: CYCLE_CONTINUED, or CYCLE_AWAITING_KEY while blocked on Ft0A
        """
        if self.cpu_waiting_register is not None:
            outcome = self.cpu_resolve_keypress()
        else:
            cpu_pc = self.cpu_registers['pc']
            cpu_operand = self.cpu_memory.read_word(cpu_pc)
            self.cpu_registers['pc'] = cpu_pc + 2
            try:
                outcome = self.cpu_execute_instruction(cpu_operand)
            except Chip8Exception:
                self.cpu_registers['pc'] = cpu_pc
                raise

        if self.cpu_decrement_per_cycle:
            self.cpu_decrement_timers()
        return outcome

    def cpu_execute_instruction(self, cpu_operand):
        """
        Decode and execute a single instruction. The program counter is not
        advanced and the timers are not ticked, which makes this handy for
        testing individual operations.

        :param cpu_operand: the 16-bit instruction word to execute
        :return: CYCLE_CONTINUED, or CYCLE_AWAITING_KEY for a blocking Ft0A
        """
        self.cpu_instruction = decode_instruction(cpu_operand)
        outcome = self.cpu_operation_lookup[self.cpu_instruction.m]()
        return outcome or CYCLE_CONTINUED

    def cpu_system_routines(self):
        """
        Opcodes starting with a 0 are one of the following instructions:

            00E0 - Clear the display
            00EE - Return from subroutine

        The machine code call 0nnn is not supported and is reported as an
        unknown op-code like any other unmatched word.
        """
        try:
            cpu_routine = self.cpu_system_routine_lookup[self.cpu_instruction.word]
        except KeyError:
            raise UnknownOpCodeException(self.cpu_instruction.word)
        cpu_routine()

    def cpu_execute_logical_instruction(self):
        """
        Execute the logical instruction based upon the lowest nibble of the
        current operand.
        """
        try:
            cpu_routine = self.cpu_logical_operation_lookup[self.cpu_instruction.n]
        except KeyError:
            raise UnknownOpCodeException(self.cpu_instruction.word)
        cpu_routine()

    def cpu_keyboard_routines(self):
        """
        Run the specified keyboard routine based upon the operand. These
        operations are:

            Es9E - SKPR Vs
            EsA1 - SKUP Vs

           Bits:  15-12    11-8      7-4      3-0
                  unused   source  9 or A    E or 1
        """
        try:
            cpu_routine = self.cpu_keyboard_routine_lookup[self.cpu_instruction.kk]
        except KeyError:
            raise UnknownOpCodeException(self.cpu_instruction.word)
        cpu_routine()

    def cpu_misc_routines(self):
        """
        Will execute one of the routines specified in misc_routines.
        """
        try:
            cpu_routine = self.cpu_misc_routine_lookup[self.cpu_instruction.kk]
        except KeyError:
            raise UnknownOpCodeException(self.cpu_instruction.word)
        return cpu_routine()

    def cpu_clear_screen(self):
        """
        00E0 - CLS

        Turn every pixel of the frame buffer off.
        """
        self.cpu_framebuffer.clear()

    def cpu_return_from_subroutine(self):
        """
        00EE - RET

        Pop the return address saved by the matching CALL into the program
        counter. Returning with an empty stack raises a
        StackUnderflowException.
        """
        self.cpu_registers['pc'] = self.cpu_stack.pop()

    def cpu_jump_to_address(self):
        """
        1nnn - JUMP nnn

        Jump to address. The address to jump to is calculated using the bits
        taken from the operand as follows:

           Bits:  15-12    11-8      7-4      3-0
                  unused  address  address  address
        """
        self.cpu_registers['pc'] = self.cpu_instruction.nnn

    def cpu_jump_to_subroutine(self):
        """
        2nnn - CALL nnn

        Jump to subroutine. Save the current program counter on the stack. The
        subroutine to jump to is taken from the operand as follows:

           Bits:  15-12    11-8      7-4      3-0
                  unused  address  address  address

        A call with all 16 stack levels in use raises a
        StackOverflowException and leaves the program counter alone.
        """
        self.cpu_stack.push(self.cpu_registers['pc'])
        self.cpu_registers['pc'] = self.cpu_instruction.nnn

    def cpu_skip_if_reg_equal_val(self):
        """
        3snn - SKE Vs, nn

        Skip if register contents equal to constant value. The calculation for
        the register and constant is performed on the operand:

           Bits:  15-12     11-8      7-4       3-0
                  unused   source  constant  constant

        The program counter is updated to skip the next instruction by
        advancing it by 2 bytes.
        """
        if self.cpu_registers['v'][self.cpu_instruction.x] == self.cpu_instruction.kk:
            self.cpu_registers['pc'] += 2

    def cpu_skip_if_reg_not_equal_val(self):
        """
        4snn - SKNE Vs, nn

        Skip if register contents not equal to constant value.
        """
        if self.cpu_registers['v'][self.cpu_instruction.x] != self.cpu_instruction.kk:
            self.cpu_registers['pc'] += 2

    def cpu_skip_if_reg_equal_reg(self):
        """
        5st0 - SKE Vs, Vt

        Skip if source register is equal to target register. The calculation
        for the registers to use is performed on the operand:

           Bits:  15-12     11-8      7-4       3-0
                  unused   source    target      0
        """
        if self.cpu_instruction.n != 0:
            raise UnknownOpCodeException(self.cpu_instruction.word)
        cpu_v = self.cpu_registers['v']
        if cpu_v[self.cpu_instruction.x] == cpu_v[self.cpu_instruction.y]:
            self.cpu_registers['pc'] += 2

    def cpu_move_value_to_reg(self):
        """
        6snn - LOAD Vs, nn

        Move the constant value into the specified register.
        """
        self.cpu_registers['v'][self.cpu_instruction.x] = self.cpu_instruction.kk

    def cpu_add_value_to_reg(self):
        """
        7snn - ADD Vs, nn

        Add the constant value to the specified register. The result wraps
        around at 256 and VF is left untouched.
        """
        cpu_target = self.cpu_instruction.x
        temp = self.cpu_registers['v'][cpu_target] + self.cpu_instruction.kk
        self.cpu_registers['v'][cpu_target] = temp & BYTE_MASK

    def cpu_move_reg_into_reg(self):
        """
        8st0 - LOAD Vs, Vt

        Move the value of the source register into the value of the target
        register. The calculation for the registers is performed on the
        operand:

           Bits:  15-12     11-8      7-4       3-0
                  unused   target    source      0
        """
        cpu_v = self.cpu_registers['v']
        cpu_v[self.cpu_instruction.x] = cpu_v[self.cpu_instruction.y]

    def cpu_logical_or(self):
        """
        8ts1 - OR   Vs, Vt
        """
        cpu_v = self.cpu_registers['v']
        cpu_v[self.cpu_instruction.x] |= cpu_v[self.cpu_instruction.y]

    def cpu_logical_and(self):
        """
        8ts2 - AND  Vs, Vt
        """
        cpu_v = self.cpu_registers['v']
        cpu_v[self.cpu_instruction.x] &= cpu_v[self.cpu_instruction.y]

    def cpu_exclusive_or(self):
        """
        8ts3 - XOR  Vs, Vt
        """
        cpu_v = self.cpu_registers['v']
        cpu_v[self.cpu_instruction.x] ^= cpu_v[self.cpu_instruction.y]

    def cpu_add_reg_to_reg(self):
        """
        8ts4 - ADD  Vt, Vs

        Add the value in the source register to the value in the target
        register, and store the result in the target register. The register
        calculations are as follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused   target    source      4

        If a carry is generated, set a carry flag in register VF.
        """
        cpu_v = self.cpu_registers['v']
        temp = cpu_v[self.cpu_instruction.x] + cpu_v[self.cpu_instruction.y]
        cpu_v[FLAG_REGISTER] = 1 if temp > BYTE_MASK else 0
        cpu_v[self.cpu_instruction.x] = temp & BYTE_MASK

    def cpu_subtract_reg_from_reg(self):
        """
        8ts5 - SUB  Vt, Vs

        Subtract the value in the source register from the value in the
        target register, and store the result in the target register. The
        register calculations are as follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused   target    source      5

        If a borrow is NOT generated (target strictly greater than source),
        set a carry flag in register VF.
        """
        cpu_v = self.cpu_registers['v']
        cpu_target_reg = cpu_v[self.cpu_instruction.x]
        cpu_source_reg = cpu_v[self.cpu_instruction.y]
        cpu_v[FLAG_REGISTER] = 1 if cpu_target_reg > cpu_source_reg else 0
        cpu_v[self.cpu_instruction.x] = (cpu_target_reg - cpu_source_reg) & BYTE_MASK

    def cpu_right_shift_reg(self):
        """
        8s06 - SHR  Vs

        Shift the bits in the specified register 1 bit to the right. Bit
        0 will be shifted into register vf.
        """
        cpu_v = self.cpu_registers['v']
        cpu_source_reg = cpu_v[self.cpu_instruction.x]
        cpu_v[FLAG_REGISTER] = cpu_source_reg & 0x1
        cpu_v[self.cpu_instruction.x] = cpu_source_reg >> 1

    def cpu_subtract_reg_from_reg1(self):
        """
        8ts7 - SUBN Vt, Vs

        Subtract the value in the target register from the value in the
        source register, and store the result in the target register. The
        register calculations are as follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused   target    source      7

        If a borrow is NOT generated, set a carry flag in register VF.
        """
        cpu_v = self.cpu_registers['v']
        cpu_target_reg = cpu_v[self.cpu_instruction.x]
        cpu_source_reg = cpu_v[self.cpu_instruction.y]
        cpu_v[FLAG_REGISTER] = 1 if cpu_source_reg > cpu_target_reg else 0
        cpu_v[self.cpu_instruction.x] = (cpu_source_reg - cpu_target_reg) & BYTE_MASK

    def cpu_left_shift_reg(self):
        """
        8s0E - SHL  Vs

        Shift the bits in the specified register 1 bit to the left. Bit
        7 will be shifted into register vf.
        """
        cpu_v = self.cpu_registers['v']
        cpu_source_reg = cpu_v[self.cpu_instruction.x]
        cpu_v[FLAG_REGISTER] = (cpu_source_reg & 0x80) >> 7
        cpu_v[self.cpu_instruction.x] = (cpu_source_reg << 1) & BYTE_MASK

    def cpu_skip_if_reg_not_equal_reg(self):
        """
        9st0 - SKNE Vs, Vt

        Skip if source register is not equal to target register.

           Bits:  15-12     11-8      7-4       3-0
                  unused   source    target      0
        """
        if self.cpu_instruction.n != 0:
            raise UnknownOpCodeException(self.cpu_instruction.word)
        cpu_v = self.cpu_registers['v']
        if cpu_v[self.cpu_instruction.x] != cpu_v[self.cpu_instruction.y]:
            self.cpu_registers['pc'] += 2

    def cpu_load_index_reg_with_value(self):
        """
        Annn - LOAD I, nnn
        """
        self.cpu_registers['index'] = self.cpu_instruction.nnn

    def cpu_jump_to_v0_plus_value(self):
        """
        Bnnn - JUMP [V0] + nnn

        Load the program counter with the address in the operand plus the
        value of register V0. A target past the top of memory is caught by
        the next fetch.
        """
        self.cpu_registers['pc'] = self.cpu_instruction.nnn + self.cpu_registers['v'][0]

    def cpu_generate_random_number(self):
        """
        Ctnn - RAND Vt, nn

        A random number between 0 and 255 is generated. The contents of it are
        then ANDed with the constant value passed in the operand. The result is
        stored in the target register.
        """
        self.cpu_registers['v'][self.cpu_instruction.x] = \
            self.cpu_instruction.kk & self.cpu_random.randint(0, BYTE_MASK)

    def cpu_draw_sprite(self):
        """
        Dxyn - DRAW x, y, num_bytes

        Draws the sprite pointed to in the index register at the specified
        x and y coordinates. Drawing is done via an XOR routine, meaning that
        if the target pixel is already turned on, and a pixel is set to be
        turned on at that same location via the draw, then the pixel is turned
        off and VF is set to 1. Otherwise VF is set to 0.

           Bits:  15-12     11-8      7-4       3-0
                  unused    x_source  y_source  num_bytes
        """
        cpu_v = self.cpu_registers['v']
        cpu_sprite = self.cpu_memory.read_range(
            self.cpu_registers['index'], self.cpu_instruction.n)
        cpu_collision = self.cpu_framebuffer.draw_sprite(
            cpu_v[self.cpu_instruction.x], cpu_v[self.cpu_instruction.y], cpu_sprite)
        cpu_v[FLAG_REGISTER] = 1 if cpu_collision else 0

    def cpu_skip_if_key_pressed(self):
        """
        Es9E - SKPR Vs

        Skip the next instruction if the key named by the low nibble of the
        source register is down.
        """
        cpu_key_to_check = self.cpu_registers['v'][self.cpu_instruction.x] & 0xF
        if self.cpu_keypad.is_pressed(cpu_key_to_check):
            self.cpu_registers['pc'] += 2

    def cpu_skip_if_key_not_pressed(self):
        """
        EsA1 - SKUP Vs
        """
        cpu_key_to_check = self.cpu_registers['v'][self.cpu_instruction.x] & 0xF
        if not self.cpu_keypad.is_pressed(cpu_key_to_check):
            self.cpu_registers['pc'] += 2

    def cpu_move_delay_timer_into_reg(self):
        """
        Ft07 - LOAD Vt, DELAY

        Move the value of the delay timer into the target register. The
        register calculation is as follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused    target     0         7
        """
        self.cpu_registers['v'][self.cpu_instruction.x] = self.cpu_timers['delay']

    def cpu_wait_for_keypress(self):
        """
        Ft0A - KEYD Vt

        Stop execution until a key is pressed. Move the value of the key
        pressed into the specified register. The register calculation is
        as follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused    target     0         A

        Rather than waiting here, the target register is remembered and the
        following cycles poll the keypad until a key goes down.
        """
        self.cpu_waiting_register = self.cpu_instruction.x
        return self.cpu_resolve_keypress()

    def cpu_resolve_keypress(self):
        """
        Finish a pending Ft0A if a key is down.

        :return: CYCLE_CONTINUED once the wait is over, CYCLE_AWAITING_KEY
            otherwise
        """
        cpu_key_pressed = self.cpu_keypad.first_pressed()
        if cpu_key_pressed is None:
            return CYCLE_AWAITING_KEY
        self.cpu_registers['v'][self.cpu_waiting_register] = cpu_key_pressed
        self.cpu_waiting_register = None
        return CYCLE_CONTINUED

    def cpu_move_reg_into_delay_timer(self):
        """
        Fs15 - LOAD DELAY, Vs
        """
        self.cpu_timers['delay'] = self.cpu_registers['v'][self.cpu_instruction.x]

    def cpu_move_reg_into_sound_timer(self):
        """
        Fs18 - LOAD SOUND, Vs
        """
        self.cpu_timers['sound'] = self.cpu_registers['v'][self.cpu_instruction.x]

    def cpu_load_index_with_reg_sprite(self):
        """
        Fs29 - LOAD I, Vs

        Load the index with the sprite indicated in the source register. All
        sprites are 5 bytes long, so the location of the specified sprite
        is its index multiplied by 5. The register calculation is as
        follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused    source     2         9
        """
        self.cpu_registers['index'] = \
            FONT_START + self.cpu_registers['v'][self.cpu_instruction.x] * FONT_GLYPH_SIZE

    def cpu_add_reg_into_index(self):
        """
        Fs1E - ADD  I, Vs

        Add the value of the register into the index register value. If the
        sum runs past the 12-bit address space VF is set to 1 (0 otherwise)
        and the index wraps around.
        """
        temp = self.cpu_registers['index'] + self.cpu_registers['v'][self.cpu_instruction.x]
        self.cpu_registers['v'][FLAG_REGISTER] = 1 if temp > INDEX_LIMIT else 0
        self.cpu_registers['index'] = temp & INDEX_LIMIT

    def cpu_store_bcd_in_memory(self):
        """
        Fs33 - BCD

        Take the value stored in source and place the digits in the following
        locations:

            hundreds   -> self.memory[index]
            tens       -> self.memory[index + 1]
            ones       -> self.memory[index + 2]

        For example, if the value is 123, then the following values will be
        placed at the specified locations:

             1 -> self.memory[index]
             2 -> self.memory[index + 1]
             3 -> self.memory[index + 2]
        """
        cpu_value = self.cpu_registers['v'][self.cpu_instruction.x]
        self.cpu_memory.write_range(
            self.cpu_registers['index'],
            (cpu_value // 100, (cpu_value // 10) % 10, cpu_value % 10))

    def cpu_store_regs_in_memory(self):
        """
        Fs55 - STOR [I], Vs

        Store registers V0 through Vs in the memory pointed to by the index
        register, then advance the index past them. The register calculation
        is as follows:

           Bits:  15-12     11-8      7-4       3-0
                  unused    source     5         5

        For example, to store all of the V registers, the source register
        would be 'F'.
        """
        cpu_count = self.cpu_instruction.x + 1
        self.cpu_memory.write_range(
            self.cpu_registers['index'], self.cpu_registers['v'][:cpu_count])
        self.cpu_registers['index'] = (self.cpu_registers['index'] + cpu_count) & INDEX_LIMIT

    def cpu_read_regs_from_memory(self):
        """
        Fs65 - LOAD Vs, [I]

        Read registers V0 through Vs from the memory pointed to by the index
        register, then advance the index past them.
        """
        cpu_count = self.cpu_instruction.x + 1
        cpu_values = self.cpu_memory.read_range(self.cpu_registers['index'], cpu_count)
        self.cpu_registers['v'][:cpu_count] = list(cpu_values)
        self.cpu_registers['index'] = (self.cpu_registers['index'] + cpu_count) & INDEX_LIMIT

    def cpu_reset(self):
        """
        Reset the CPU by blanking out all registers, memory, the stack, the
        keypad and the screen, reloading the font set and pointing the
        program counter at the start of program space.
        """
        self.cpu_registers['v'] = [0] * NUM_REGISTERS
        self.cpu_registers['pc'] = PROGRAM_COUNTER_START
        self.cpu_registers['index'] = 0
        self.cpu_timers['delay'] = 0
        self.cpu_timers['sound'] = 0
        self.cpu_waiting_register = None
        self.cpu_stack.clear()
        self.cpu_keypad.release_all()
        self.cpu_framebuffer.clear(mark_changed=False)
        self.cpu_memory.clear()
        self.cpu_memory.load_font()

    def cpu_load_rom(self, cpu_romdata):
        """
        Load a program into memory at the start of program space.

        :param cpu_romdata: the raw bytes of the program
        """
        self.cpu_memory.load_program(cpu_romdata)

    def cpu_set_key(self, cpu_key, cpu_pressed):
        self.cpu_keypad.set_key(cpu_key, cpu_pressed)

    def cpu_delay_timer(self):
        return self.cpu_timers['delay']

    def cpu_set_delay_timer(self, cpu_value):
        self.cpu_timers['delay'] = cpu_value & BYTE_MASK

    def cpu_sound_timer(self):
        return self.cpu_timers['sound']

    def cpu_awaiting_key(self):
        return self.cpu_waiting_register is not None

    def cpu_decrement_timers(self):
        """
        Decrement both the sound and delay timer.
        """
        if self.cpu_timers['delay'] != 0:
            self.cpu_timers['delay'] -= 1

        if self.cpu_timers['sound'] != 0:
            self.cpu_timers['sound'] -= 1
