from page_table import PageTable


class Frame:
    def __init__(self):
        self.pid = None
        self.page_number = None
        self.in_use = False
        self.load_time = 0

    def claim(self, pid, page_number, load_time):
        self.pid = pid
        self.page_number = page_number
        self.in_use = True
        self.load_time = load_time

    def release(self):
        self.pid = None
        self.page_number = None
        self.in_use = False
        self.load_time = 0


class FrameTable:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        self.frames = [Frame() for _ in range(num_frames)]

    def find_free_frame(self):
        for i, frame in enumerate(self.frames):
            if not frame.in_use:
                return i
        return None

    def find_oldest_frame(self):
        # Strict less-than keeps the lowest index among equal load times
        oldest_time = None
        victim = None
        for i, frame in enumerate(self.frames):
            if frame.in_use and (oldest_time is None or frame.load_time < oldest_time):
                oldest_time = frame.load_time
                victim = i
        return victim

    def allocate_frame(self, frame_num, pid, page_number, load_time):
        self.frames[frame_num].claim(pid, page_number, load_time)

    def free_frame(self, frame_num):
        self.frames[frame_num].release()

    def touch(self, frame_num, load_time):
        self.frames[frame_num].load_time = load_time

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def frames_owned_by(self, pid):
        return [i for i, frame in enumerate(self.frames) if frame.in_use and frame.pid == pid]

    def in_use_count(self):
        return sum(1 for frame in self.frames if frame.in_use)


class Process:
    def __init__(self, pid, memory_requested, page_size):
        self.pid = pid
        self.num_pages = -(-memory_requested // page_size)
        self.memory_requested = memory_requested
        self.memory_allocated = self.num_pages * page_size
        self.internal_fragmentation = self.memory_allocated - memory_requested
        self.page_table = PageTable(pid, self.num_pages)


class SimulationStats:
    def __init__(self, page_size, num_frames):
        self.page_size = page_size
        self.num_frames = num_frames
        self.page_faults = 0
        self.page_hits = 0
        self.total_accesses = 0
        self.total_internal_fragmentation = 0
        self.total_allocated_memory = 0
        self.total_requested_memory = 0
        self.num_processes = 0

    def record_process(self, process):
        self.num_processes += 1
        self.total_requested_memory += process.memory_requested
        self.total_allocated_memory += process.memory_allocated
        self.total_internal_fragmentation += process.internal_fragmentation

    def page_fault_rate(self):
        if self.total_accesses == 0:
            return 0.0
        return self.page_faults / self.total_accesses * 100.0

    def hit_rate(self):
        if self.total_accesses == 0:
            return 0.0
        return self.page_hits / self.total_accesses * 100.0

    def fragmentation_percent(self):
        if self.total_allocated_memory == 0:
            return 0.0
        return self.total_internal_fragmentation / self.total_allocated_memory * 100.0

    def avg_fragmentation_per_process(self):
        if self.num_processes == 0:
            return 0.0
        return self.total_internal_fragmentation / self.num_processes

    def __str__(self):
        return (f"Page Size: {self.page_size} B ({self.num_frames} frames)\n"
                f"Page Faults: {self.page_faults}\n"
                f"Page Hits: {self.page_hits}\n"
                f"Total Accesses: {self.total_accesses}\n"
                f"Fault Rate: {self.page_fault_rate():.2f}%\n"
                f"Internal Fragmentation: {self.total_internal_fragmentation} B "
                f"({self.fragmentation_percent():.2f}%)")
