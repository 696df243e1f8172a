"""
做市机器人 (mmbot)

为配置的交易对维护对称的限价挂单阶梯（网格），
保证盘口买卖两侧始终有流动性。
"""

__version__ = '1.0.0'
