"""
服务层
"""
