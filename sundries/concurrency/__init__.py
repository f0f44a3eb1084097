from sundries.concurrency.parallel import parallel as parallel
from sundries.concurrency.retry import retry as retry
from sundries.concurrency.sleep import sleep as sleep
from sundries.concurrency.timeout import timeout as timeout
