from collections import namedtuple
import seqarray


Task = namedtuple("Task", ["name", "minutes", "event_type"])

tasks = seqarray.Array()
tasks.push(Task("Task 1", 30, 1)).push(Task("Task 2", 0, 2))
tasks.unshift(Task("Task 0", 15, 1)).push(Task("Task 3", 45, 2))
print(tasks.join("\n"))


first_type1 = tasks.filter(lambda task: task.event_type == 1)
print("type 1 tasks: {}".format(first_type1.map(lambda task: task.name).join(", ")))

all_timed = tasks.every(lambda task: task.minutes > 0)
print("all tasks are timed: {}".format(all_timed))

total = seqarray.reduce(tasks, 0, lambda minutes, task: minutes + task.minutes)
print("total time: {} minutes".format(total))

by_duration = tasks.to_reversed(lambda a, b: a.minutes < b.minutes)
print("longest first: {}".format(by_duration.map(lambda task: task.name).join(", ")))


task, found = tasks.find(lambda task: task.event_type == 1)
print(task.name, found)

task, found = tasks.find(lambda task: task.event_type == 3)
print(task, found)


tasks.splice(1, 2, Task("Task 4", 5, 3))
print(tasks.map(lambda task: task.name).join(", "))
