import random

import pytest

from mmu import MMU, InvalidPage, InvalidProcess, MMUError, NoProcessSlots


def test_frame_count_is_floor_of_memory_over_page_size():
    assert MMU(1024, 65536).num_frames == 64
    assert MMU(24576, 65536).num_frames == 2
    assert MMU(1000, 65536).num_frames == 65
    assert len(MMU(64, 65536).frame_table.frames) == 1024


@pytest.mark.parametrize("page_size", [0, -64, 131072])
def test_invalid_page_size_rejected(page_size):
    with pytest.raises(ValueError):
        MMU(page_size, 65536)


def test_create_process_tracks_cumulative_stats():
    mmu = MMU(1024, 65536)
    pids = [mmu.create_process(size) for size in (1500, 3200, 7800, 12000, 5500)]
    assert pids == [0, 1, 2, 3, 4]
    assert [mmu.get_process(pid).num_pages for pid in pids] == [2, 4, 8, 12, 6]

    expected_frag = sum(mmu.get_process(pid).internal_fragmentation for pid in pids)
    assert mmu.stats.num_processes == 5
    assert mmu.stats.total_requested_memory == 30000
    assert mmu.stats.total_allocated_memory == 32 * 1024
    assert mmu.stats.total_internal_fragmentation == expected_frag == 2768


def test_create_process_rejects_non_positive_size():
    mmu = MMU(1024, 65536)
    with pytest.raises(ValueError):
        mmu.create_process(0)


def test_process_slots_exhausted():
    mmu = MMU(1024, 65536)
    for _ in range(8):
        mmu.create_process(100)
    with pytest.raises(NoProcessSlots):
        mmu.create_process(100)
    assert mmu.stats.num_processes == 8


def test_terminated_slot_is_reused():
    mmu = MMU(1024, 65536, max_processes=3)
    for _ in range(3):
        mmu.create_process(100)
    mmu.terminate_process(1)
    assert mmu.create_process(2048) == 1
    assert mmu.get_process(1).num_pages == 2


def test_fault_then_hit():
    mmu = MMU(1024, 65536)
    pid = mmu.create_process(4096)

    assert mmu.access_memory(pid, 2) is False
    entry = mmu.get_process(pid).page_table.get_entry(2)
    assert entry.present
    assert entry.referenced
    assert entry.frame_number == 0

    assert mmu.access_memory(pid, 2) is True
    assert mmu.stats.page_faults == 1
    assert mmu.stats.page_hits == 1
    assert mmu.stats.total_accesses == 2


def test_dirty_bit_follows_writes():
    mmu = MMU(1024, 65536)
    pid = mmu.create_process(4096)
    table = mmu.get_process(pid).page_table

    mmu.access_memory(pid, 0, is_write=True)
    assert table.get_entry(0).dirty
    mmu.access_memory(pid, 0, is_write=False)
    assert table.get_entry(0).dirty

    mmu.access_memory(pid, 1, is_write=False)
    assert not table.get_entry(1).dirty
    mmu.access_memory(pid, 1, is_write=True)
    assert table.get_entry(1).dirty


def test_hit_refreshes_frame_load_time():
    mmu = MMU(1024, 65536)
    pid = mmu.create_process(2048)
    mmu.access_memory(pid, 0)
    mmu.access_memory(pid, 1)
    mmu.access_memory(pid, 0)
    frame = mmu.frame_table.get_frame_info(0)
    assert frame.load_time == mmu.time_counter == 3


def test_invalid_process_still_counts_access():
    mmu = MMU(1024, 65536)
    with pytest.raises(InvalidProcess):
        mmu.access_memory(5, 0)
    with pytest.raises(InvalidProcess):
        mmu.access_memory(100, 0)
    assert mmu.stats.total_accesses == 2
    assert mmu.time_counter == 2
    assert mmu.stats.page_faults == 0
    assert mmu.stats.page_hits == 0


def test_invalid_page():
    mmu = MMU(1024, 65536)
    pid = mmu.create_process(2048)
    with pytest.raises(InvalidPage):
        mmu.access_memory(pid, 2)
    with pytest.raises(MMUError):
        mmu.access_memory(pid, -1)
    assert mmu.stats.total_accesses == 2
    assert mmu.frame_table.in_use_count() == 0


def test_eviction_picks_oldest_load_time():
    mmu = MMU(1024, 2048)
    pid = mmu.create_process(4096)
    table = mmu.get_process(pid).page_table

    mmu.access_memory(pid, 0, is_write=True)  # frame 0
    mmu.access_memory(pid, 1, is_write=True)  # frame 1
    mmu.access_memory(pid, 0)                 # hit, frame 0 refreshed
    assert mmu.access_memory(pid, 2) is False

    evicted = table.get_entry(1)
    assert not evicted.present
    assert evicted.frame_number is None
    assert not evicted.dirty
    assert not evicted.referenced

    loaded = table.get_entry(2)
    assert loaded.present
    assert loaded.referenced
    assert loaded.frame_number == 1
    assert table.get_entry(0).present

    frame = mmu.frame_table.get_frame_info(1)
    assert (frame.pid, frame.page_number, frame.load_time) == (pid, 2, 4)


def test_eviction_across_processes():
    mmu = MMU(1024, 2048)
    a = mmu.create_process(2048)
    b = mmu.create_process(1024)

    mmu.access_memory(a, 0, is_write=True)
    mmu.access_memory(b, 0)
    mmu.access_memory(a, 1)

    a_entry = mmu.get_process(a).page_table.get_entry(0)
    assert not a_entry.present
    assert not a_entry.dirty
    assert mmu.get_process(b).page_table.get_entry(0).frame_number == 1
    assert mmu.frame_table.get_frame_info(0).page_number == 1
    assert mmu.frame_table.frames_owned_by(a) == [0]


def test_frames_in_use_never_exceed_frame_count():
    mmu = MMU(512, 4096)
    pids = [mmu.create_process(size) for size in (3000, 5000, 700)]
    rng = random.Random(7)
    for _ in range(500):
        pid = rng.choice(pids)
        page = rng.randrange(mmu.get_process(pid).num_pages)
        mmu.access_memory(pid, page, rng.random() < 0.5)
        assert mmu.frame_table.in_use_count() <= mmu.num_frames
    assert mmu.stats.page_faults + mmu.stats.page_hits == mmu.stats.total_accesses == 500


def test_terminate_releases_frames_and_is_idempotent():
    mmu = MMU(1024, 65536)
    a = mmu.create_process(4096)
    b = mmu.create_process(2048)
    for page in range(4):
        mmu.access_memory(a, page)
    mmu.access_memory(b, 0)
    before = vars(mmu.stats).copy()

    mmu.terminate_process(a)
    assert mmu.frame_table.frames_owned_by(a) == []
    assert mmu.frame_table.in_use_count() == 1
    assert mmu.get_process(a) is None

    mmu.terminate_process(a)
    mmu.terminate_process(42)
    assert mmu.frame_table.in_use_count() == 1
    assert vars(mmu.stats) == before

    with pytest.raises(InvalidProcess):
        mmu.access_memory(a, 0)
