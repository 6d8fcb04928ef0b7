PHYSICAL_MEMORY_SIZE = 65536  # 64KB
MAX_PROCESSES = 8
RANDOM_SEED = 12345

PAGE_SIZES = [64, 128, 256, 512, 1024, 2048, 4096, 8192, 8192 * 2, 8192 * 3]

# Requested sizes in bytes
PROCESS_SIZES = [
    1500,   # 1.5 KB
    3200,   # 3.2 KB
    7800,   # 7.8 KB
    12000,  # 12 KB
    5500,   # 5.5 KB
]

ACCESSES_PER_PROCESS = 200


class SimulationConfig:
    def __init__(self,
                 physical_memory_size=PHYSICAL_MEMORY_SIZE,
                 page_sizes=None,
                 process_sizes=None,
                 accesses_per_process=ACCESSES_PER_PROCESS,
                 seed=RANDOM_SEED):
        self.physical_memory_size = physical_memory_size
        self.page_sizes = list(PAGE_SIZES if page_sizes is None else page_sizes)
        self.process_sizes = list(PROCESS_SIZES if process_sizes is None else process_sizes)
        self.accesses_per_process = accesses_per_process
        self.seed = seed
        self.validate()

    def _validate_page_sizes(self):
        if not self.page_sizes:
            raise ValueError("At least one page size is required.")
        for page_size in self.page_sizes:
            if page_size < 1:
                raise ValueError(f"Page size must be positive, got {page_size}.")
            if page_size > self.physical_memory_size:
                raise ValueError(
                    f"Page size {page_size} exceeds physical memory "
                    f"({self.physical_memory_size} bytes)."
                )

    def _validate_processes(self):
        if not self.process_sizes:
            raise ValueError("At least one process size is required.")
        if len(self.process_sizes) > MAX_PROCESSES:
            raise ValueError(f"At most {MAX_PROCESSES} processes can run at once.")
        for size in self.process_sizes:
            if size < 1:
                raise ValueError(f"Process size must be positive, got {size}.")

    def validate(self):
        if self.physical_memory_size < 1:
            raise ValueError("Physical memory size must be positive.")
        if self.accesses_per_process < 0:
            raise ValueError("Accesses per process cannot be negative.")
        self._validate_page_sizes()
        self._validate_processes()

    def __str__(self):
        return (f"Physical Memory: {self.physical_memory_size} bytes\n"
                f"Page Sizes: {', '.join(str(s) for s in self.page_sizes)}\n"
                f"Processes: {len(self.process_sizes)} "
                f"({', '.join(str(s) for s in self.process_sizes)} bytes)\n"
                f"Accesses per process: {self.accesses_per_process}\n"
                f"Seed: {self.seed}")
