import asyncio
import json
import os
import time

import aiofiles
import httpx
from cdp_use import CDPClient
from playwright.async_api import async_playwright

from ax_snapshot import A11yService, collect_interesting_nodes


async def dump_accessibility_snapshot(url: str = 'https://google.com'):
	async with async_playwright() as p:
		browser = await p.chromium.launch(args=['--remote-debugging-port=9222'], headless=False)
		page = await browser.new_page()
		await page.goto(url)

		async with httpx.AsyncClient() as client:
			version_info = await client.get('http://localhost:9222/json/version')
			browser_ws_url = version_info.json()['webSocketDebuggerUrl']

		async with CDPClient(browser_ws_url) as cdp:
			cdp_targets = await cdp.send.Target.getTargets()
			target_id = next(
				target['targetId'] for target in cdp_targets['targetInfos'] if target['type'] == 'page' and target['url'] == page.url
			)
			session = await cdp.send.Target.attachToTarget(params={'targetId': target_id, 'flatten': True})
			a11y_service = A11yService.from_cdp(cdp, session['sessionId'])

			# if dir does not exist, create it
			if not os.path.exists('tmp/ax_snapshot'):
				os.makedirs('tmp/ax_snapshot')

			start_time = time.time()
			tree = await a11y_service.get_accessibility_tree()
			print(f'Tree build took {time.time() - start_time:.2f} seconds')
			print(f'  - Total nodes: {1 + sum(1 for _ in tree.iter_descendants())}')
			print(f'  - Interesting nodes: {len(collect_interesting_nodes(tree))}')

			full_snapshot = await a11y_service.snapshot(interesting_only=False)
			async with aiofiles.open('tmp/ax_snapshot/snapshot_full.json', 'w') as f:
				await f.write(json.dumps(full_snapshot, indent=2))

			interesting_snapshot = await a11y_service.snapshot()
			async with aiofiles.open('tmp/ax_snapshot/snapshot_interesting.json', 'w') as f:
				await f.write(json.dumps(interesting_snapshot, indent=2))
			print('Saved snapshots to tmp/ax_snapshot/')

			# Snapshot rooted at the first focusable element on the page
			remote_object = await cdp.send.Runtime.evaluate(
				params={'expression': "document.querySelector('input, button, a[href]')"},
				session_id=session['sessionId'],
			)
			if remote_object['result'].get('objectId'):
				element_snapshot = await a11y_service.snapshot(root=remote_object['result'])
				print(f'Element snapshot: {element_snapshot}')

		await browser.close()


if __name__ == '__main__':
	asyncio.run(dump_accessibility_snapshot())
