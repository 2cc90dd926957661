import os

from pertnet.engine import PertEngine
from pertnet.render import DiagramLayout, DrawioRenderer
from pertnet.task import TaskSet

# 获取当前脚本所在目录
current_dir = os.path.dirname(os.path.abspath(__file__))

# 从文件加载任务
tasks = TaskSet()
tasks.load_tasks(os.path.join(current_dir, "tasks.csv"))

# 计算并输出
result = PertEngine(tasks).calculate()
print(f"项目总工期：{result.project_finish_time:.2f}")
print(f"关键路径：{' -> '.join(result.critical_path_ids)}")

DrawioRenderer(DiagramLayout(mode="layered")).save(result, os.path.join(current_dir, "pert.drawio"))

# 可视化甘特图
result.visualize()
