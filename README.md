# oscamp

Small, self-contained models of operating-system and concurrency mechanisms.
Each module covers one idea and can be imported and used on its own. The
package has no third-party dependencies.

## Modules

| Module | What it covers |
|---|---|
| `oscamp.thread_spawn` | `double_in_thread`, `parallel_sum`, `named_sleeper`, `increment_thread_local`, `scoped_slice_sum`, `handle_panic` (raises `ThreadPanicked`) |
| `oscamp.mutex_counter` | `concurrent_counter`, `concurrent_collect`: shared state behind a lock |
| `oscamp.channel` | `simple_send_recv`, `multi_producer`: message passing between threads |
| `oscamp.process_pipe` | `run_command`, `run_command_with_result`, `pipe_through_cat`, `pipe_through_grep`, `get_exit_code` |
| `oscamp.mem_primitives` | `memcpy`, `memset`, `memmove`, `strlen`, `strcmp` on byte buffers |
| `oscamp.bump_allocator` | `Layout`, `align_up`, `BumpAllocator` over a simulated address range |
| `oscamp.free_list_allocator` | `FreeListAllocator`: first-fit reuse of freed blocks, bump allocation otherwise |
| `oscamp.fd_table` | `File` (abstract) and `FdTable` with lowest-free-descriptor reuse |
| `oscamp.atomic_counter` | `AtomicCounter`: increment, decrement, compare-and-swap, `fetch_multiply` |
| `oscamp.atomic_ordering` | `FlagChannel` (one-slot ready-flag channel) and `OnceCell` |
| `oscamp.spinlock` | `SpinLock` with explicit `lock`, `unlock`, `try_lock` |
| `oscamp.spinlock_guard` | `SpinLock` whose `lock()` returns a `SpinGuard` context manager |
| `oscamp.rwlock` | writer-priority `RwLock` with read and write guards |
| `oscamp.basic_future` | hand-written awaitables `CountDown` and `YieldOnce` |
| `oscamp.async_tasks` | `concurrent_squares`, `parallel_sleep_tasks` on asyncio tasks |
| `oscamp.async_channel` | `producer_consumer`, `fan_in` over asyncio queues |
| `oscamp.select_timeout` | `with_timeout`, `race` |
| `oscamp.pte_flags` | building and decoding RISC-V SV39 page-table entries |
| `oscamp.page_table_walk` | `SingleLevelPageTable` translating 32-bit addresses |
| `oscamp.multi_level_pt` | `Sv39PageTable`: three-level SV39 table with 2 MiB superpages |
| `oscamp.tlb_sim` | FIFO `Tlb` with ASIDs and flushes, and an `Mmu` on top of it |

## Installation

```
pip install .
```

## Examples

Page-table entries:

```python
from oscamp.pte_flags import make_pte, extract_ppn, is_leaf, PTE_V, PTE_R

pte = make_pte(0x12345, PTE_V | PTE_R)
assert extract_ppn(pte) == 0x12345
assert is_leaf(pte)
```

Address translation. Failures are raised as exceptions: `PageFault`, and in
`oscamp.page_table_walk` also `PermissionDenied` for writes to read-only pages.

```python
from oscamp.multi_level_pt import Sv39PageTable, PTE_V, PTE_R, PTE_W

pt = Sv39PageTable()
pt.map_superpage(0x200000, 0x80200000, PTE_V | PTE_R | PTE_W)
assert pt.translate(0x200ABC) == 0x80200ABC
```

A TLB in front of a page table:

```python
from oscamp.tlb_sim import Mmu

mmu = Mmu(4)
mmu.add_mapping(1, 0x100, 0x200, 0x7)
mmu.switch_asid(1)
assert mmu.translate(0x100) == 0x200   # miss, filled from the page table
assert mmu.translate(0x100) == 0x200   # hit
print(mmu.tlb.stats.hit_rate())        # 0.5
```

Allocators return integer addresses and raise `MemoryError` when the heap is
exhausted:

```python
from oscamp.bump_allocator import BumpAllocator, Layout

heap = BumpAllocator(0x1000, 0x2000)
addr = heap.alloc(Layout(16, 8))
assert addr % 8 == 0
heap.reset()
```

Locks with guards:

```python
from oscamp.rwlock import RwLock

lock = RwLock(0)
with lock.write() as guard:
    guard.value = 42
with lock.read() as guard:
    assert guard.value == 42
```

Byte buffers, including overlapping moves:

```python
from oscamp.mem_primitives import memmove

buf = bytearray([1, 2, 3, 4, 5])
memmove(buf, buf, 4, dst_offset=1)
assert buf == bytearray([1, 1, 2, 3, 4])
```

Timeouts:

```python
import asyncio
from oscamp.select_timeout import with_timeout

async def slow():
    await asyncio.sleep(0.2)
    return 42

print(asyncio.run(with_timeout(slow(), 50)))  # None
```

## What the package does not do

It is a library only: there is no command-line program or interactive
exercise runner. It does not model context switching, coroutines with their
own stacks or green-thread scheduling, and it does not issue raw system calls.

## Running the tests

```
pip install ".[test]"
pytest
```

`oscamp.process_pipe` starts `echo`, `cat`, `grep` and `sh`, so its tests need
a POSIX system.