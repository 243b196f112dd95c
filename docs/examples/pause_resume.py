import logging
import resumable


logging.basicConfig(level=logging.DEBUG)

tasks = ['compile', 'test', 'lint', 'package', 'deploy']

# process pairs of tasks in batches, the generator is paused in between
pairs = resumable.combinations(tasks, 2)
batch_idx = 0
while not pairs.done:
    batch = [pair for _, pair in resumable.szip(range(4), pairs)]
    if len(batch) > 0:
        print("batch {}: {}".format(batch_idx, batch))
    batch_idx += 1

# the grouping of the powerset makes it easy to stop at a given size
for size, subsets in enumerate(resumable.powerset(tasks)):
    if size > 2:
        break
    print("{} subsets of size {}".format(len(list(subsets)), size))

# nothing to enumerate, this is logged but is not an error
print(list(resumable.permutations(tasks[:2], 3)))

# resuming a finished generator is an error
try:
    pairs.resume()
except resumable.ExhaustionError as error:
    print(error)
