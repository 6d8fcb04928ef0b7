from config import MAX_PROCESSES
from memory_manager import FrameTable, Process, SimulationStats


class MMUError(Exception):
    pass


class NoProcessSlots(MMUError):
    pass


class InvalidProcess(MMUError):
    pass


class InvalidPage(MMUError):
    pass


class MMU:
    """
    Memory management unit for a single page size.

    Owns the frame table and the process slots. Replacement evicts the frame
    with the oldest load time; hits refresh that time as well.
    """

    def __init__(self, page_size, physical_memory_size, max_processes=MAX_PROCESSES):
        if page_size < 1:
            raise ValueError(f"Page size must be positive, got {page_size}")
        if page_size > physical_memory_size:
            raise ValueError(
                f"Page size {page_size} leaves no frames in {physical_memory_size} bytes"
            )
        self.page_size = page_size
        self.physical_memory_size = physical_memory_size
        self.num_frames = physical_memory_size // page_size
        self.frame_table = FrameTable(self.num_frames)
        self.processes = [None] * max_processes  # pid -> Process
        self.time_counter = 0
        self.stats = SimulationStats(page_size, self.num_frames)

    def get_process(self, pid):
        if 0 <= pid < len(self.processes):
            return self.processes[pid]
        return None

    def create_process(self, memory_size):
        if memory_size < 1:
            raise ValueError(f"Process memory size must be positive, got {memory_size}")

        for pid, slot in enumerate(self.processes):
            if slot is None:
                process = Process(pid, memory_size, self.page_size)
                self.processes[pid] = process
                self.stats.record_process(process)
                return pid

        raise NoProcessSlots(f"All {len(self.processes)} process slots are in use")

    def terminate_process(self, pid):
        if self.get_process(pid) is None:
            return
        for frame_num in self.frame_table.frames_owned_by(pid):
            self.frame_table.free_frame(frame_num)
        self.processes[pid] = None

    def access_memory(self, pid, page_num, is_write=False):
        """
        Access one logical page of a live process.

        Returns True on a page hit and False on a page fault. The access is
        counted before the process and page are validated.
        """
        self.time_counter += 1
        self.stats.total_accesses += 1

        process = self.get_process(pid)
        if process is None:
            raise InvalidProcess(f"Process {pid} is not running")
        if page_num < 0 or page_num >= process.num_pages:
            raise InvalidPage(
                f"Page {page_num} is outside process {pid} ({process.num_pages} pages)"
            )

        entry = process.page_table.get_entry(page_num)

        if entry.present:
            self.stats.page_hits += 1
            entry.referenced = True
            if is_write:
                entry.dirty = True
            self.frame_table.touch(entry.frame_number, self.time_counter)
            return True

        self.stats.page_faults += 1
        frame_num = self.allocate_frame(pid, page_num)
        entry.map(frame_num, write=is_write)
        return False

    def allocate_frame(self, pid, page_num):
        frame_num = self.frame_table.find_free_frame()
        if frame_num is None:
            return self.evict_and_allocate(pid, page_num)
        self.frame_table.allocate_frame(frame_num, pid, page_num, self.time_counter)
        return frame_num

    def evict_and_allocate(self, pid, page_num):
        victim_frame = self.frame_table.find_oldest_frame()
        victim = self.frame_table.get_frame_info(victim_frame)

        # Owner may already be gone
        owner = self.get_process(victim.pid)
        if owner is not None:
            owner.page_table.get_entry(victim.page_number).clear()

        self.frame_table.allocate_frame(victim_frame, pid, page_num, self.time_counter)
        return victim_frame
