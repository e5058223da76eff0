import uvicorn
import os
import sys
import argparse


def main():
    parser = argparse.ArgumentParser(description="ClueMart Backend Launcher")
    parser.add_argument("--port", type=int, default=8421, help="Port to run the backend server on (default: 8421)")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    args = parser.parse_args()

    # 将 backend/ 加入 sys.path，使 cluemart_api 包在未安装时也能被导入
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, backend_dir)

    from cluemart_api.main import app
    port = getattr(args, 'port')
    print(f"ClueMart 后端服务即将启动于端口 {port} ...")
    print(f"若在本机运行，可访问 http://127.0.0.1:{port}/docs 查看 API 文档")

    # 在生产环境中，推荐使用 Gunicorn 作为进程管理器
    # 例如: gunicorn -w 4 -k uvicorn.workers.UvicornWorker -b 0.0.0.0:8421 cluemart_api.main:app
    uvicorn.run(app, host=args.host, port=port)


if __name__ == "__main__":
    main()
