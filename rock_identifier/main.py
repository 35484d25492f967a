"""
Rock Identifier - Main Entry Point
암석 식별 에이전트 메인 실행 파일

Usage:
    # CLI 실행
    python -m rock_identifier.main --describe "dark fine-grained volcanic rock"

    # 또는 모듈로 import
    from rock_identifier.workflow import run_workflow
    result = run_workflow(description="porous light volcanic foam")
"""

import argparse
import json

from .config import get_config, init_config
from .logging_config import setup_logging


def parse_args(args=None):
    """커맨드라인 인자 파싱"""
    parser = argparse.ArgumentParser(
        description='Rock Identifier - 설명 텍스트 기반 암석 식별',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 암석 식별 (외부 데이터 포함)
  python -m rock_identifier.main --describe "porous light volcanic foam"

  # 외부 조회 없이 정적 데이터만 사용
  python -m rock_identifier.main --describe "soft white rock" --no-enrich

  # 식별 후 질문
  python -m rock_identifier.main --describe "glassy black rock" --ask "How was this rock formed?"

  # API 서버 실행
  python -m rock_identifier.main --server

  # 식별 가능한 암석 목록
  python -m rock_identifier.main --list-rocks
        """
    )

    parser.add_argument('--describe', '-d', type=str, default=None,
                        help='암석 설명 텍스트')
    parser.add_argument('--colors', type=str, default=None,
                        help='이미지 분석 색상 (쉼표 구분, 전달만 함)')
    parser.add_argument('--no-enrich', action='store_true',
                        help='외부 데이터 조회 생략 (정적 참조 데이터만 사용)')
    parser.add_argument('--ask', type=str, default=None,
                        help='식별 결과에 대한 질문')
    parser.add_argument('--json', action='store_true',
                        help='결과를 JSON으로 출력')
    parser.add_argument('--list-rocks', action='store_true',
                        help='식별 가능한 암석 목록 출력')
    parser.add_argument('--server', action='store_true',
                        help='FastAPI 서버 실행')
    parser.add_argument('--host', type=str, default=None,
                        help='서버 호스트 (기본값: config server.host)')
    parser.add_argument('--port', type=int, default=None,
                        help='서버 포트 (기본값: config server.port)')
    parser.add_argument('--config', '-c', type=str, default=None,
                        help='config.yaml 경로')
    parser.add_argument('--log-level', type=str, default=None,
                        help='로그 레벨 (DEBUG, INFO, WARNING ...)')

    return parser.parse_args(args)


def list_rocks():
    """식별 가능한 암석 목록 출력"""
    from .reference_data import ROCK_CATALOG

    print("\n" + "=" * 60)
    print("식별 가능한 암석 목록")
    print("=" * 60)

    for name, entry in ROCK_CATALOG.items():
        print(f"  {name:<10} {entry['type']:<12} {entry['subtype']}")


def print_rock(rock: dict):
    """식별 결과 출력"""
    print("\n" + "=" * 60)
    print(f"{rock['name']}  ({rock['type']}, {rock['confidence']}% confidence)")
    print("=" * 60)
    print(f"\n형성: {rock['formation']}")
    print(f"분류: {rock['classification'].get('group')}"
          + (f" / {rock['classification']['family']}" if rock['classification'].get('family') else ""))
    print(f"구성 광물: {', '.join(rock['composition'])}")
    print(f"용도: {', '.join(rock['uses'])}")
    print(f"산지: {', '.join(rock['locations'])}")
    print("\n흥미로운 사실:")
    for fact in rock['funFacts']:
        print(f"  - {fact}")
    if rock.get('image'):
        print(f"\n이미지: {rock['image']}")


def run_server(host: str, port: int):
    """FastAPI 서버 실행"""
    import uvicorn

    print("\n" + "=" * 60)
    print("Rock Identifier API Server")
    print("=" * 60)
    print(f"\n서버 시작: http://{host}:{port}")
    print(f"API 문서: http://{host}:{port}/docs")
    print("\n종료하려면 Ctrl+C를 누르세요.\n")

    uvicorn.run(
        "rock_identifier.api.server:app",
        host=host,
        port=port,
        reload=False,
    )


def run_identify_cli(description, colors, offline, question, as_json):
    """식별 워크플로우 CLI 실행"""
    from .chat import SUGGESTED_QUESTIONS, answer_question, greeting
    from .models import EnrichedRock
    from .workflow import run_workflow

    image_analysis = None
    if colors:
        image_analysis = {"colors": [c.strip() for c in colors.split(',') if c.strip()]}

    result = run_workflow(description=description, image_analysis=image_analysis, offline=offline)

    if result.get("status") != "completed":
        print(f"\n[FAILED]: {result.get('error', 'Unknown error')}")
        return result

    if question:
        rock = EnrichedRock.from_dict(result["rock"])
        if offline:
            result["answer"] = answer_question(question, rock, fetch_scientific=None)
        else:
            result["answer"] = answer_question(question, rock)

    if as_json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return result

    print_rock(result["rock"])
    if question:
        print(f"\nQ: {question}")
        print(f"A: {result['answer']}")
    else:
        print("\n" + greeting(EnrichedRock.from_dict(result["rock"])))
        print("\n질문 예시 (--ask):")
        for suggestion in SUGGESTED_QUESTIONS:
            print(f"  - {suggestion}")

    return result


def main(args=None):
    """메인 함수"""
    args = parse_args(args)

    config = init_config(args.config) if args.config else get_config()
    setup_logging(args.log_level or config.get("logging", {}).get("level", "INFO"))

    if args.list_rocks:
        list_rocks()
        return

    if args.server:
        server = config.get("server", {})
        run_server(args.host or server.get("host", "0.0.0.0"), args.port or server.get("port", 8000))
        return

    run_identify_cli(
        description=args.describe,
        colors=args.colors,
        offline=args.no_enrich,
        question=args.ask,
        as_json=args.json,
    )


if __name__ == "__main__":
    main()
