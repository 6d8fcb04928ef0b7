class PageTableEntry:
    def __init__(self, page_number):
        self.page_number = page_number
        self.frame_number = None  # None means not mapped
        self.present = False
        self.dirty = False
        self.referenced = False

    def map(self, frame_number, write=False):
        self.frame_number = frame_number
        self.present = True
        self.referenced = True
        self.dirty = write

    def clear(self):
        self.frame_number = None
        self.present = False
        self.dirty = False
        self.referenced = False


class PageTable:
    def __init__(self, process_id, num_pages):
        self.process_id = process_id
        self.entries = [PageTableEntry(i) for i in range(num_pages)]

    def __len__(self):
        return len(self.entries)

    def get_entry(self, page_number):
        return self.entries[page_number]
